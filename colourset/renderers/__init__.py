"""Auto-discovery of renderer modules.

Every .py file in this package that defines a `renderer` object is
auto-registered by colourset.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the renderer files at runtime.
"""

# PyInstaller hidden imports — keep this list in sync with renderer modules
import colourset.renderers.check as _check  # noqa: F401
import colourset.renderers.css as _css  # noqa: F401
import colourset.renderers.fill as _fill  # noqa: F401
import colourset.renderers.json_dump as _json_dump  # noqa: F401
import colourset.renderers.listing as _listing  # noqa: F401
import colourset.renderers.swatch as _swatch  # noqa: F401
import colourset.renderers.xresources as _xresources  # noqa: F401
