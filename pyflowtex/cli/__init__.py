"""
Command Line Interface for PyFlowTex

Command line utilities to generate and post-process flow textures without
writing Python scripts.

Available Commands:
- generate (pft-generate): Generate a flow texture and save it as PNG
- blur (pft-blur): Apply a directional blur to an existing image

Author: B.G.
"""

_CLI_SUBMODULES = {
    "generate": (".flowtex_commands", "generate"),
    "blur": (".flowtex_commands", "blur"),
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
