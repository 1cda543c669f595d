from searchclasspath.matching.targets import (
    ClassTarget,
    ExactClass,
    ExactPackage,
    ListOnly,
    PackageTarget,
    PartialClass,
    PartialPackage,
    Target,
    build_target,
)

__all__ = [
    "ClassTarget",
    "ExactClass",
    "ExactPackage",
    "ListOnly",
    "PackageTarget",
    "PartialClass",
    "PartialPackage",
    "Target",
    "build_target",
]
