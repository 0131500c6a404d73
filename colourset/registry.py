"""Renderer discovery.

Every module in colourset/renderers/ that defines a module-level `renderer`
(a Renderer) becomes an output format, keyed by the renderer's name. The
module docstring is kept alongside it as the renderer's user documentation:
the first line is the one-line summary shown in `colourset help`, the whole
text is what `colourset help <name>` prints.

Frozen PyInstaller binaries have no package directory to scan, so the
module names are also listed explicitly.
"""

import importlib
import pkgutil

from colourset.core.types import Renderer

_registry: dict[str, Renderer] = {}
_docs: dict[str, str] = {}

# Scanned in a normal install; used as-is in a frozen binary
_RENDERER_MODULES = (
    'check',
    'css',
    'fill',
    'json_dump',
    'listing',
    'swatch',
    'xresources',
)


def _module_names() -> list[str]:
    import colourset.renderers as pkg

    names = [name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    return names or list(_RENDERER_MODULES)


def discover() -> dict[str, Renderer]:
    """Import the renderer modules once and return name -> Renderer."""
    if not _registry:
        for modname in _module_names():
            module = importlib.import_module(f'colourset.renderers.{modname}')
            rend = getattr(module, 'renderer', None)
            if not isinstance(rend, Renderer):
                continue
            _registry[rend.name] = rend
            _docs[rend.name] = (module.__doc__ or '').strip()
    return _registry


def names() -> list[str]:
    return sorted(discover())


def get(name: str) -> Renderer:
    """Look up a renderer. Raises KeyError naming the available ones."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown renderer: {name}. Available: {", ".join(names())}')
    return reg[name]


def module_doc(name: str) -> str:
    """Full docstring of the renderer's module, '' when it has none."""
    get(name)
    return _docs[name]


def summary(name: str) -> str:
    """First docstring line, or the renderer's help text."""
    doc = module_doc(name)
    return doc.splitlines()[0] if doc else get(name).help
