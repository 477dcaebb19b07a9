"""Locks, compare-and-swap and condition variables at work.

Bank accounts guarded by locks, an atomic cell with compare-and-exchange,
a stack pushed with compare-and-exchange, and two condition-variable
hand-offs: a worker thread and a cookie factory.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


def _amount(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class InsufficientFundsError(Exception):
    """Raised when an account cannot cover a withdrawal or a transfer."""


class BankAccount:
    """An account whose balance is guarded by a lock."""

    processing_delay = 0.1

    def __init__(self, initial_balance: float) -> None:
        self._balance = initial_balance
        self._lock = threading.Lock()

    def withdraw(self, amount: float) -> float:
        """Take amount out of the account and return the new balance."""
        with self._lock:
            if self._balance < amount:
                raise InsufficientFundsError("Insufficient funds")
            time.sleep(self.processing_delay)
            self._balance -= amount
            print(f"Withdrew {_amount(amount)}, new balance: {_amount(self._balance)}")
            return self._balance

    def _move(self, to: BankAccount, amount: float, failure: str) -> None:
        if self._balance < amount:
            raise InsufficientFundsError(failure)
        self._balance -= amount
        to._balance += amount

    def transfer(self, to: BankAccount, amount: float) -> None:
        """Move money, locking this account first and then the other one.

        Two transfers in opposite directions at the same time can deadlock.
        """
        if to is self:
            raise ValueError("cannot transfer to the same account")
        with self._lock:
            print("Locked source account")
            time.sleep(self.processing_delay)
            with to._lock:
                print("Locked destination account")
                self._move(to, amount, "Transfer failed due to insufficient funds")
                print(f"Transferred {_amount(amount)} successfully")

    def safe_transfer(self, to: BankAccount, amount: float) -> None:
        """Move money, taking both locks in a fixed order so it cannot deadlock."""
        if to is self:
            raise ValueError("cannot transfer to the same account")
        first, second = sorted((self, to), key=id)
        with first._lock, second._lock:
            self._move(to, amount, "Safe transfer failed due to insufficient funds")
            print(f"Safely transferred {_amount(amount)} successfully")

    def balance(self) -> float:
        with self._lock:
            return self._balance


class AtomicValue:
    """A cell holding one value, updated by compare-and-exchange."""

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> Any:
        with self._lock:
            return self._value

    def compare_exchange(self, expected: Any, desired: Any) -> tuple[bool, Any]:
        """Store desired if the cell holds expected.

        Returns whether the store happened and the value the cell held.
        """
        with self._lock:
            current = self._value
            if current is expected or current == expected:
                self._value = desired
                return True, current
            return False, current


def atomic_multiply(cell: AtomicValue, factor: Any) -> Any:
    """Multiply the cell's value by factor with a compare-and-exchange loop."""
    observed = cell.load()
    while True:
        desired = observed * factor
        stored, observed = cell.compare_exchange(observed, desired)
        if stored:
            return desired


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LockFreeStack:
    """A stack whose head is replaced by compare-and-exchange."""

    def __init__(self) -> None:
        self.head = AtomicValue(None)

    def push(self, data: Any) -> None:
        node = _Node(data, self.head.load())
        while True:
            stored, observed = self.head.compare_exchange(node.next, node)
            if stored:
                return
            node.next = observed

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from the top of the stack down."""
        node = self.head.load()
        while node is not None:
            yield node.data
            node = node.next


class Worker:
    """Hands data to a worker thread and waits until it has been processed."""

    def __init__(self) -> None:
        self._cv = threading.Condition()
        self.data = ""
        self.ready = False
        self.processed = False

    def worker_thread(self) -> None:
        with self._cv:
            self._cv.wait_for(lambda: self.ready)
            print("Worker thread is processing data")
            self.data += " after processing"
            self.processed = True
            print("Worker thread signals data processing completed")
            self._cv.notify()

    def main_thread(self) -> str:
        """Run the worker, send it data, wait for the result and return it."""
        worker = threading.Thread(target=self.worker_thread)
        worker.start()
        with self._cv:
            self.data = "Example data"
            self.ready = True
            print("we signal data ready for processing")
            self._cv.notify()
        with self._cv:
            self._cv.wait_for(lambda: self.processed)
        print(f"Worker is done, data = {self.data}")
        worker.join()
        return self.data


class Factory:
    """Producers add numbered cookies; consumers wait for one and take the last."""

    def __init__(self, production_delay: float = 1.0, consumption_delay: float = 2.0) -> None:
        self.production_delay = production_delay
        self.consumption_delay = consumption_delay
        self._cv = threading.Condition()
        self.cookies: list[int] = []
        self.cookie_id = 0

    def produce_a_cookie(self) -> int:
        time.sleep(self.production_delay)
        with self._cv:
            cookie = self.cookie_id
            self.cookies.append(cookie)
            self.cookie_id += 1
            print(f"a cookie {cookie} is ready\n")
            self._cv.notify()
        return cookie

    def consume_a_cookie(self) -> int:
        print(f"cookies = {len(self.cookies)}")
        with self._cv:
            print("between lock and wait")
            self._cv.wait_for(lambda: self.cookies)
            cookie = self.cookies.pop()
            print(f"a cookie {cookie} is acquired\n")
        time.sleep(self.consumption_delay)
        return cookie