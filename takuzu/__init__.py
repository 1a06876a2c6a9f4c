from takuzu.src import *  # noqa: F401,F403
from takuzu.src import __all__ as _core_all
from takuzu.bootcamps import *  # noqa: F401,F403
from takuzu.bootcamps import __all__ as _bootcamp_all

__all__ = list(_core_all) + list(_bootcamp_all)

__version__ = "0.1.0"
