"""Backend implementations for calday."""

from typing import Any, Literal

from calday.backends.base import Backend
from calday.backends.pandas import PandasBackend
from calday.backends.polars import PolarsBackend
from calday.utils import _is_pandas, _is_polars

BackendName = Literal["pandas", "polars"]


def get_backend(name: BackendName = "pandas") -> Backend:
    """Return the backend registered under ``name``.

    Raises:
        ValueError: If ``name`` is not "pandas" or "polars".
    """
    if name == "pandas":
        return PandasBackend()
    elif name == "polars":
        return PolarsBackend()
    raise ValueError(f"Unknown backend: {name!r}")


def backend_for(series: Any) -> Backend:
    """Return the backend matching the type of ``series``.

    Raises:
        TypeError: If ``series`` is neither a pandas nor a polars column.
    """
    if _is_polars(series):
        return PolarsBackend()
    if _is_pandas(series):
        return PandasBackend()
    raise TypeError(f"Unsupported series type: {type(series)}")


__all__ = [
    "Backend",
    "BackendName",
    "PandasBackend",
    "PolarsBackend",
    "backend_for",
    "get_backend",
]
