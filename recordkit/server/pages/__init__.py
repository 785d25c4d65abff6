"""Server rendered HTML pages built from the ``recordkit.web.html`` components."""
