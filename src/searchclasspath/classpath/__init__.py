from searchclasspath.classpath.builder import build_classpath

__all__ = ["build_classpath"]
