# scenes/loader.py

import logging
import pkgutil
import importlib

log = logging.getLogger(__name__)


def register_all(registry) -> list:
    """
    Import every scene module next to this one and let it add itself to
    *registry* through its `register(registry)` hook.

    Private modules (leading underscore) are skipped.  Returns the names of
    the modules that registered something.
    """
    import scenes
    found = []
    for info in pkgutil.iter_modules(scenes.__path__):
        if info.name == "loader" or info.name.startswith("_"):
            continue
        module = importlib.import_module(f"scenes.{info.name}")
        hook = getattr(module, "register", None)
        if hook is None:
            log.debug("scenes.%s has no register hook", info.name)
            continue
        hook(registry)
        found.append(info.name)
    log.debug("Registered scene modules: %s", found)
    return found
