"""Background order processing: bounded hand-off, timeout race and summary encoding."""

from __future__ import annotations

import logging
import threading
import time

from warung.channel import Channel
from warung.config import ORDER_TIMEOUT_SECONDS, QUEUE_CAPACITY
from warung.errors import OrderTimeout
from warung.models import Order, OrderStatus
from warung.summary import summarize

logger = logging.getLogger("warung.processor")


class OrderProcessor:
    """Summarizes finalized orders on worker threads.

    Each ``submit`` starts one worker that races an inbound enqueue against the
    per-order deadline. Orders that win the race are summarized and pushed onto
    the outbound channel for ``take``; orders that lose are dropped and logged.
    Accepted orders stay on the inbound channel, so a processor admits at most
    ``capacity`` orders and sheds every later one once its deadline passes.

    Call order for the coordinator: ``submit`` (any number of times),
    ``await_all``, ``shutdown``, then ``take`` until it raises ``queue.Empty``.
    """

    def __init__(self, capacity: int = QUEUE_CAPACITY, timeout: float = ORDER_TIMEOUT_SECONDS) -> None:
        if timeout < 0:
            raise ValueError("timeout must be non-negative")
        self.timeout = timeout
        self._inbound: Channel[Order] = Channel(capacity)
        self._outbound: Channel[Order] = Channel(capacity)
        self._workers: list[threading.Thread] = []
        self._lock = threading.Lock()
        self._shut_down = False
        self._summarized = 0
        self._dropped = 0

    @property
    def in_flight(self) -> int:
        """Orders accepted into the inbound channel."""
        return len(self._inbound)

    @property
    def ready(self) -> int:
        """Summarized orders waiting for pickup."""
        return len(self._outbound)

    @property
    def summarized_count(self) -> int:
        with self._lock:
            return self._summarized

    @property
    def dropped_count(self) -> int:
        with self._lock:
            return self._dropped

    def submit(self, order: Order) -> None:
        """Hand an order to a new worker and return immediately."""
        if order.status is not OrderStatus.FINALIZED:
            raise ValueError(f"order {order.order_id} must be finalized before submit, not {order.status.value}")
        deadline = time.monotonic() + self.timeout
        with self._lock:
            if self._shut_down:
                raise RuntimeError("processor has been shut down")
            order.status = OrderStatus.SUBMITTED
            worker = threading.Thread(
                target=self._process,
                args=(order, deadline),
                name=f"order-{order.order_id}",
                daemon=True,
            )
            self._workers.append(worker)
        logger.debug("order %s submitted total=%.2f", order.order_id, order.total)
        worker.start()

    def await_all(self) -> None:
        """Block until every worker started by ``submit`` has finished."""
        while True:
            with self._lock:
                pending = [worker for worker in self._workers if worker.is_alive()]
                if not pending:
                    self._workers.clear()
                    return
            for worker in pending:
                worker.join()

    def shutdown(self) -> None:
        """Close both channels; only valid once ``await_all`` has returned."""
        with self._lock:
            if any(worker.is_alive() for worker in self._workers):
                raise RuntimeError("shutdown called while order workers are still running")
            self._shut_down = True
        self._inbound.close()
        self._outbound.close()
        logger.debug("processor shut down summarized=%d dropped=%d", self.summarized_count, self.dropped_count)

    def take(self, timeout: float | None = None) -> Order:
        """Return the next summarized order; raises ``queue.Empty`` once closed and drained."""
        return self._outbound.get(timeout=timeout)

    def _process(self, order: Order, deadline: float) -> None:
        try:
            accepted = self._inbound.put(order, timeout=max(0.0, deadline - time.monotonic()))
            if not accepted:
                self._drop(order)
                return

            summarize(order)
            order.status = OrderStatus.SUMMARIZED
            with self._lock:
                self._summarized += 1
            logger.debug("order %s summarized", order.order_id)

            # inbound is never drained, so outbound cannot fill past capacity
            self._outbound.put(order)
        except Exception:  # pragma: no cover - background guard
            logger.exception("order %s failed in worker", order.order_id)
            if order.status is not OrderStatus.SUMMARIZED:
                self._drop(order, log=False)

    def _drop(self, order: Order, log: bool = True) -> None:
        order.status = OrderStatus.DROPPED
        with self._lock:
            self._dropped += 1
        if log:
            logger.warning("%s", OrderTimeout(order.order_id, self.timeout))
