"""
simple_authz – administrative authorization decision engine.

Import path convention::

    from simple_authz.authorization import SimpleAuthorizationProvider, StaticNodeRole
    from simple_authz.kernel.security import Subject, Resource, Action, Environment
    from simple_authz.kernel.errors import MalformedResourceError
    from simple_authz.config import AuthorizationProviderConfig
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
