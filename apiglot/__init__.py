"""apiglot — CLI do wdrażania i18n w projektach z pomocą API Apiglot."""

__version__ = "1.0.0"
