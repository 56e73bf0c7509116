"""Import ShellCheck diagnostics as normalized code-quality issues."""

__version__ = "0.1.0"
