"""
Command Line Interface for PySineNoise

Command line entry points that render noise terrains without writing Python
scripts.

Available Commands:
- render_reference: Render the reference images (psn-render)
- fractal: Render one fractal terrain, optionally saving/loading its field (psn-fractal)

Author: B.G.
"""

_CLI_SUBMODULES = {
    "render_reference": (".render_commands", "render_reference"),
    "fractal": (".fractal_commands", "fractal"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
