"""
Compositor - variable resolution layer for spoken feedback templates
"""

from compositor.config import APP_NAME, VERSION, CompositorSettings, VerbositySettings
from compositor.session import Collaborators, CompositorSession

__version__ = VERSION

__all__ = [
    "APP_NAME",
    "Collaborators",
    "CompositorSession",
    "CompositorSettings",
    "VERSION",
    "VerbositySettings",
    "__version__",
]
