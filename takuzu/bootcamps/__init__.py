import importlib
import logging
import os
import pkgutil

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("TAKUZU_LOGGING_LEVEL", "WARN"))

__all__ = []

# 自动导入子模块 + 提升 __all__ 中的内容
for importer, modname, ispkg in pkgutil.iter_modules(__path__, __name__ + "."):
    if ispkg:
        try:
            module = importlib.import_module(modname)
            module_name = modname.split(".")[-1]
            globals()[module_name] = module

            for name in getattr(module, "__all__", []):
                if hasattr(module, name):
                    globals()[name] = getattr(module, name)
                    __all__.append(name)
        except ImportError as e:
            logger.warning(f"Failed to import {modname}: {e}")
