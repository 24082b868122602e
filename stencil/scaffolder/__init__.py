"""Stencil scaffolder -- materialises new projects from a template tree.

Quick usage::

    from stencil.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    result = await generator.generate("my-project", "/tmp/output")
"""

from stencil.scaffolder.copier import copy_tree, tree_snapshot
from stencil.scaffolder.generator import ProjectGenerator, ScaffoldResult
from stencil.scaffolder.installer import DependencyInstaller

__all__ = [
    "DependencyInstaller",
    "ProjectGenerator",
    "ScaffoldResult",
    "copy_tree",
    "tree_snapshot",
]
