"""Search a Java classpath for classes, packages and resources."""

__version__ = "0.1.0"
