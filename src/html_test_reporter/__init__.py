"""html-test-reporter: render test-run results as a static HTML report."""

__version__ = "0.1.0"
