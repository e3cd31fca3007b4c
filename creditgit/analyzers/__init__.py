"""History and contributor analyzers, returning plain dataclasses."""

# Lazy re-exports: import only when the package itself is imported (not when
# individual modules are run via `python -m`), which prevents a harmless but
# noisy RuntimeWarning from runpy.
from importlib import import_module as _im


def __getattr__(name: str):  # noqa: N807
    _map = {
        "load_history": ("history", "load_history"),
        "walk_commits": ("history", "walk_commits"),
        "aggregate_contributors": ("contributors", "aggregate_contributors"),
        "order_contributors": ("contributors", "order_contributors"),
        "parse_sort_mode": ("contributors", "parse_sort_mode"),
    }
    if name in _map:
        mod_name, attr = _map[name]
        mod = _im(f"creditgit.analyzers.{mod_name}")
        return getattr(mod, attr)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "load_history",
    "walk_commits",
    "aggregate_contributors",
    "order_contributors",
    "parse_sort_mode",
]
