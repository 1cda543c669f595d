from searchclasspath.scan.archive import scan_archive
from searchclasspath.scan.directory import scan_directory, walk_tree

__all__ = ["scan_archive", "scan_directory", "walk_tree"]
