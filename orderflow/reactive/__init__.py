"""
Reactive — the order pipeline as an RxPY operator chain.

    from orderflow import reactive as R

    outcome = await R.first_value(
        R.ReactiveProcessor(steps).complete_order_process(123)
    )
"""

from orderflow.reactive._operators import from_async, first_value
from orderflow.reactive._processor import ReactiveProcessor

__all__ = ("from_async", "first_value", "ReactiveProcessor")
