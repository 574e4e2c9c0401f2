"""Load and validate router configuration YAML.

The primary entry point is :func:`load_router_config`, which reads the
``router`` section of a YAML file, applies defaults, and returns a
:class:`RouterConfig` able to build the configured page policy and router.

Examples
--------
>>> from docroute.config import RouterConfig
>>> RouterConfig().policy
'default'
"""

from .loader import build_router_config, load_router_config
from .models import RouterConfig, RouterConfigError

__all__ = [
    "RouterConfig",
    "RouterConfigError",
    "build_router_config",
    "load_router_config",
]
