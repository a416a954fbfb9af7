"""Static classification tables for package identifiers.

Two independent, case-insensitive lookups:

* :data:`EXCLUDED` — builtins, runtime globals and non-package namespaces.
  A match is dropped by the scanner before it reaches any result.
* :data:`DEV_ONLY` — build, test, lint and tooling packages that are used
  through configuration rather than imports, so they are never reported
  as unused.

Both tables are frozen at import time.
"""

from __future__ import annotations

import re

# ── exclusion table ──────────────────────────────────────────────────────

_NODE_BUILTINS = (
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
)

_JS_GLOBALS = (
    "global", "globalthis", "settimeout", "setinterval", "cleartimeout",
    "clearinterval", "json", "math", "date", "array", "object", "string",
    "number", "boolean", "function", "regexp", "error", "promise", "map",
    "set", "weakmap", "weakset", "symbol", "proxy", "reflect", "intl",
    "webassembly", "atomics", "sharedarraybuffer", "dataview",
    "float32array", "float64array", "int8array", "int16array", "int32array",
    "uint8array", "uint8clampedarray", "uint16array", "uint32array",
    "bigint64array", "biguint64array",
)

# Host APIs and bare words that show up in import position but are not
# installable packages.
_JS_NON_PACKAGES = (
    "@vitejs", "@eslint", "@types", "node", "javascript", "vscode", "package",
)

_PYTHON_STDLIB = (
    "__future__", "__main__", "abc", "argparse", "array", "ast", "asyncio",
    "atexit", "base64", "binascii", "bisect", "builtins", "bz2", "calendar",
    "cmath", "cmd", "code", "codecs", "codeop", "collections", "colorsys", "concurrent",
    "configparser", "contextlib", "contextvars", "copy", "copyreg", "cProfile", "csv",
    "ctypes", "curses", "dataclasses", "datetime", "dbm", "decimal",
    "difflib", "dis", "doctest", "email", "encodings", "ensurepip", "enum", "errno",
    "faulthandler", "fcntl", "filecmp", "fileinput", "fnmatch", "fractions",
    "ftplib", "functools", "gc", "getopt", "getpass", "gettext", "glob",
    "graphlib", "grp", "gzip", "hashlib", "heapq", "hmac", "html", "imaplib",
    "importlib", "inspect", "io", "ipaddress", "itertools", "keyword",
    "linecache", "locale", "logging", "lzma", "mailbox", "marshal",
    "mimetypes", "mmap", "multiprocessing", "numbers", "operator",
    "optparse", "pathlib", "pdb", "pickle", "pkgutil", "platform",
    "plistlib", "poplib", "posixpath", "pprint", "profile", "pstats", "pty",
    "pwd", "py_compile", "pydoc", "queue", "quopri", "random", "re", "reprlib",
    "resource", "runpy", "sched", "secrets", "select", "selectors", "shelve",
    "shlex", "shutil", "signal", "site", "smtplib", "socket", "socketserver",
    "sqlite3", "ssl", "stat", "statistics", "struct", "subprocess",
    "sysconfig", "syslog", "tabnanny", "tarfile", "tempfile", "termios",
    "textwrap", "threading", "time", "timeit", "tkinter", "token",
    "tokenize", "tomllib", "trace", "traceback", "tracemalloc", "types",
    "typing", "unicodedata", "unittest", "urllib", "uuid", "venv", "warnings", "wave",
    "weakref", "webbrowser", "winreg", "wsgiref", "xml", "xmlrpc", "zipapp",
    "zipfile", "zipimport", "zoneinfo",
)

_RUBY_STDLIB = (
    "benchmark", "bigdecimal", "cgi", "coverage", "date", "digest", "erb",
    "etc", "fiber", "fileutils", "find", "forwardable", "io/console",
    "ipaddr", "logger", "monitor", "net/http", "objspace", "observer",
    "open-uri", "open3", "openssl", "optparse", "ostruct", "pp", "prettyprint",
    "psych", "rbconfig", "ripper", "securerandom", "singleton", "socket",
    "stringio", "strscan", "timeout", "tmpdir", "tsort", "uri",
)

_PHP_NON_PACKAGES = (
    # leading segments of application namespaces, never vendor names
    "app/http", "app/models", "app/providers", "app/console", "app/exceptions",
    "app/controller", "app/entity", "app/repository", "tests/unit",
    "tests/feature",
)

EXCLUDED: frozenset[str] = frozenset(
    name.lower()
    for group in (
        _NODE_BUILTINS,
        _JS_GLOBALS,
        _JS_NON_PACKAGES,
        _PYTHON_STDLIB,
        _RUBY_STDLIB,
        _PHP_NON_PACKAGES,
    )
    for name in group
)

# ── dev-only table ───────────────────────────────────────────────────────

_JS_BUILD = (
    "react-scripts", "vite", "@vitejs/plugin-react", "@vitejs/plugin-vue",
    "@vitejs/plugin-react-swc", "webpack", "webpack-cli", "webpack-dev-server",
    "webpack-merge", "webpack-bundle-analyzer", "rollup", "@rollup/plugin-node-resolve",
    "@rollup/plugin-commonjs", "@rollup/plugin-typescript", "rollup-plugin-terser",
    "rollup-plugin-typescript2", "parcel", "esbuild", "swc", "@swc/core",
    "@swc/cli", "turbo", "nx", "lerna", "rush", "tsup", "babel-loader",
    "@babel/core", "@babel/cli", "@babel/preset-env", "@babel/preset-react",
    "@babel/preset-typescript", "@babel/register", "babel-jest",
    "html-webpack-plugin", "copy-webpack-plugin", "terser-webpack-plugin",
    "ts-loader", "source-map-loader", "file-loader", "url-loader",
)

_JS_TYPESCRIPT = (
    "typescript", "ts-node", "ts-node-dev", "tsx", "ts-jest", "tsc-alias",
    "tsconfig-paths", "@types/node", "@types/react", "@types/react-dom",
    "@types/react-router-dom", "@types/express", "@types/cors",
    "@types/bcrypt", "@types/jsonwebtoken", "@types/multer",
    "@types/passport", "@types/lodash", "@types/uuid", "@types/debug",
    "@types/cookie-parser", "@types/compression", "@types/morgan",
    "@types/vscode", "@types/fs-extra", "@types/glob", "@types/mocha",
    "@types/jest", "@types/chai", "@types/sinon", "@types/supertest",
    "@types/selenium-webdriver", "@types/puppeteer", "@types/ws",
    "@types/yargs", "@types/semver", "@types/js-yaml",
)

_JS_FRAMEWORK_CLI = (
    "@vue/cli", "@vue/cli-service", "@vue/cli-plugin-babel",
    "@vue/cli-plugin-eslint", "@vue/cli-plugin-router",
    "@vue/cli-plugin-typescript", "@vue/cli-plugin-vuex",
    "@vue/compiler-sfc", "@vue/test-utils", "@vue/eslint-config-prettier",
    "@vue/eslint-config-typescript", "vue-loader", "vue-style-loader",
    "vue-template-compiler", "vue-tsc", "@nuxt/devtools",
    "@nuxt/typescript-build", "create-react-app", "@craco/craco",
    "react-app-rewired", "customize-cra", "react-dev-utils",
    "react-refresh", "@pmmmwh/react-refresh-webpack-plugin",
    "@angular/cli", "@angular-devkit/build-angular",
    "@angular-devkit/core", "@angular-devkit/schematics",
    "@angular/compiler-cli", "@angular/language-service",
    "@angular-eslint/builder", "@angular-eslint/eslint-plugin",
    "@angular-eslint/template-parser", "ng-packagr", "@sveltejs/kit",
    "@sveltejs/adapter-auto", "@sveltejs/adapter-node",
    "@sveltejs/adapter-static", "@sveltejs/vite-plugin-svelte",
    "svelte-check", "svelte-preprocess", "svelte-loader", "@expo/cli",
    "@nestjs/cli", "@nestjs/schematics", "@nestjs/testing",
)

_JS_TEST = (
    "jest", "jest-environment-jsdom", "jest-environment-node",
    "@jest/globals", "@jest/types", "mocha", "chai", "chai-as-promised",
    "sinon", "sinon-chai", "supertest", "nock", "msw", "cypress",
    "playwright", "@playwright/test", "puppeteer", "selenium-webdriver",
    "webdriverio", "@wdio/cli", "@wdio/local-runner",
    "@wdio/mocha-framework", "@testing-library/react",
    "@testing-library/vue", "@testing-library/svelte",
    "@testing-library/angular", "@testing-library/jest-dom",
    "@testing-library/user-event", "@testing-library/dom", "vitest",
    "@vitest/ui", "@vitest/coverage-v8", "c8", "nyc", "ava", "tap",
    "tape", "qunit", "enzyme", "enzyme-adapter-react-16",
    "enzyme-to-json", "karma", "karma-chrome-launcher", "karma-coverage",
    "karma-jasmine", "karma-jasmine-html-reporter", "jasmine",
    "jasmine-core", "jasmine-spec-reporter", "protractor", "jsdom",
    "happy-dom", "@vscode/test-cli", "@vscode/test-electron",
)

_JS_LINT = (
    "eslint", "@eslint/js", "@eslint/eslintrc", "eslint-config-airbnb",
    "eslint-config-airbnb-base", "eslint-config-prettier",
    "eslint-config-standard", "eslint-config-next", "eslint-plugin-import",
    "eslint-plugin-jsx-a11y", "eslint-plugin-node", "eslint-plugin-prettier",
    "eslint-plugin-promise", "eslint-plugin-react",
    "eslint-plugin-react-hooks", "eslint-plugin-react-refresh",
    "eslint-plugin-vue", "eslint-plugin-svelte", "eslint-plugin-jest",
    "@typescript-eslint/eslint-plugin", "@typescript-eslint/parser",
    "typescript-eslint", "prettier", "prettier-plugin-tailwindcss",
    "stylelint", "stylelint-config-standard", "stylelint-config-prettier",
    "stylelint-scss", "jshint", "jslint", "tslint", "xo", "standard",
    "semistandard", "biome", "@biomejs/biome",
)

_JS_STYLE = (
    "sass", "node-sass", "sass-loader", "less", "less-loader", "stylus",
    "stylus-loader", "postcss", "postcss-cli", "postcss-loader",
    "postcss-preset-env", "autoprefixer", "tailwindcss",
    "@tailwindcss/forms", "@tailwindcss/typography",
    "@tailwindcss/aspect-ratio", "@tailwindcss/vite", "css-loader",
    "style-loader", "mini-css-extract-plugin", "purgecss",
    "@fullhuman/postcss-purgecss",
)

_JS_UTIL = (
    "nodemon", "concurrently", "npm-run-all", "npm-run-all2", "wait-on",
    "cross-env", "dotenv-cli", "env-cmd", "rimraf", "del-cli", "cpx",
    "copyfiles", "mkdirp", "chokidar-cli", "live-server", "browser-sync",
    "http-server", "serve", "typedoc", "jsdoc", "esdoc", "docsify-cli",
    "vuepress", "@docusaurus/core", "storybook", "@storybook/react",
    "@storybook/vue3", "@storybook/addon-essentials", "husky",
    "lint-staged", "commitizen", "cz-conventional-changelog", "commitlint",
    "@commitlint/cli", "@commitlint/config-conventional",
    "semantic-release", "standard-version", "release-it",
    "@changesets/cli", "@vscode/vsce", "vsce", "patch-package",
    "source-map-explorer", "size-limit",
)

_PYTHON = (
    "pytest", "pytest-cov", "pytest-mock", "pytest-asyncio",
    "pytest-django", "pytest-flask", "pytest-xdist", "pytest-timeout",
    "pytest-vcr", "unittest2", "nose", "nose2", "coverage", "coveralls",
    "codecov", "tox", "nox", "flake8", "pylint", "pycodestyle", "pyflakes",
    "pydocstyle", "autopep8", "yapf", "black", "isort", "ruff", "mypy",
    "pyright", "bandit", "safety", "pre-commit", "sphinx",
    "sphinx-rtd-theme", "mkdocs", "mkdocs-material", "jupyter", "notebook",
    "ipython", "ipdb", "pipenv", "poetry", "hatch", "setuptools", "wheel",
    "build", "twine", "bump2version", "factory-boy", "faker", "mock",
    "responses", "vcrpy", "hypothesis", "freezegun", "django-debug-toolbar",
    "django-extensions", "flask-testing", "types-requests", "types-pyyaml",
)

_PHP = (
    "phpunit/phpunit", "phpstan/phpstan", "vimeo/psalm", "psalm/phar",
    "squizlabs/php_codesniffer", "friendsofphp/php-cs-fixer", "phpmd/phpmd",
    "sebastian/phpcpd", "phploc/phploc", "pdepend/pdepend",
    "mockery/mockery", "fakerphp/faker", "laravel/telescope",
    "laravel/dusk", "laravel/tinker", "laravel/sail", "laravel/pint",
    "nunomaduro/collision", "barryvdh/laravel-debugbar",
    "barryvdh/laravel-ide-helper", "symfony/debug-bundle",
    "symfony/web-profiler-bundle", "symfony/maker-bundle",
    "doctrine/doctrine-fixtures-bundle", "phpspec/phpspec", "behat/behat",
    "codeception/codeception", "deployer/deployer",
    "roave/security-advisories", "rector/rector", "pestphp/pest",
)

_RUBY = (
    "rspec", "rspec-core", "rspec-expectations", "rspec-mocks",
    "rspec-rails", "minitest", "test-unit", "capybara", "factory_bot",
    "factory_bot_rails", "rubocop", "rubocop-rails", "rubocop-rspec",
    "rubocop-performance", "reek", "brakeman", "bundler-audit", "simplecov",
    "guard", "guard-rspec", "guard-livereload", "spring",
    "spring-commands-rspec", "byebug", "pry", "pry-rails", "better_errors",
    "binding_of_caller", "web-console", "listen", "yard", "rdoc",
    "rails-erd", "annotate", "webmock", "vcr", "database_cleaner",
    "shoulda-matchers",
)

_JVM = (
    "junit", "junit-jupiter", "testng", "mockito-core", "mockito",
    "powermock", "hamcrest", "assertj-core", "spring-boot-starter-test",
    "spring-test", "spring-boot-devtools", "selenium-java", "cucumber-java",
    "rest-assured", "wiremock", "checkstyle", "pmd", "spotbugs", "findbugs",
    "jacoco", "maven-surefire-plugin", "maven-failsafe-plugin",
    "maven-checkstyle-plugin", "maven-pmd-plugin", "maven-compiler-plugin",
    "lombok", "kotlintest", "kotest", "mockk", "kluent", "detekt", "ktlint",
    "kotlinx-coroutines-test", "scalatest", "scalamock", "scalacheck",
    "specs2", "sbt", "scalastyle", "wartremover", "scoverage",
)

_DOTNET = (
    "microsoft.net.test.sdk", "xunit", "xunit.runner.visualstudio",
    "nunit", "nunit3testadapter", "mstest.testframework",
    "mstest.testadapter", "moq", "nsubstitute", "fluentassertions",
    "autofixture", "bogus", "coverlet.collector", "coverlet.msbuild",
    "reportgenerator", "stylecop.analyzers",
    "microsoft.codeanalysis.analyzers", "sonaranalyzer.csharp",
    "microsoft.codeanalysis.netanalyzers",
)

_GO = (
    "github.com/stretchr/testify", "github.com/golang/mock",
    "go.uber.org/mock", "github.com/onsi/ginkgo", "github.com/onsi/ginkgo/v2",
    "github.com/onsi/gomega", "github.com/golangci/golangci-lint",
    "github.com/google/go-cmp", "gotest.tools", "honnef.co/go/tools",
)

_RUST = (
    "tokio-test", "proptest", "quickcheck", "criterion", "mockall",
    "serial_test", "assert_cmd", "assert_fs", "predicates",
    "pretty_assertions", "insta", "rstest", "cargo-audit",
    "cargo-outdated", "cargo-deny", "cargo-tarpaulin", "cargo-watch",
    "cargo-expand", "clippy", "rustfmt",
)

_OTHER = (
    # Swift
    "quick", "nimble", "ohhttpstubs", "cuckoo", "swiftlint", "swiftformat",
    "sourcery", "xctest",
    # Elixir
    "exunit", "bypass", "credo", "dialyxir", "excoveralls", "ex_doc",
    "phoenix_live_reload",
    # Haskell
    "hspec", "tasty", "hlint", "hindent", "stylish-haskell",
    # Clojure
    "leiningen", "midje", "eastwood", "kibit", "cloverage",
    # Dart / Flutter
    "test", "mockito", "flutter_test", "integration_test", "flutter_driver",
    "flutter_lints", "lints", "build_runner", "dart_code_metrics",
    "dartdoc",
)

DEV_ONLY: frozenset[str] = frozenset(
    name.lower()
    for group in (
        _JS_BUILD,
        _JS_TYPESCRIPT,
        _JS_FRAMEWORK_CLI,
        _JS_TEST,
        _JS_LINT,
        _JS_STYLE,
        _JS_UTIL,
        _PYTHON,
        _PHP,
        _RUBY,
        _JVM,
        _DOTNET,
        _GO,
        _RUST,
        _OTHER,
    )
    for name in group
)

# npm package-name grammar: optional "@scope/" then a lowercase name.
_VALID_NAME_RE = re.compile(r"^(@[a-z0-9-~][a-z0-9-._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")


def is_excluded(package_id: str) -> bool:
    return package_id.lower() in EXCLUDED


def is_dev_only(package_id: str) -> bool:
    return package_id.lower() in DEV_ONLY


def is_valid_package_name(package_id: str) -> bool:
    """True if *package_id* looks like a syntactically valid package name."""
    return bool(_VALID_NAME_RE.match(package_id))
