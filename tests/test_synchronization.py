import threading

import pytest

from lemkis.synchronization import (
    AtomicValue,
    BankAccount,
    Factory,
    InsufficientFundsError,
    LockFreeStack,
    Worker,
    atomic_multiply,
)


def _account(balance):
    account = BankAccount(balance)
    account.processing_delay = 0
    return account


def test_withdraw_reduces_balance(capsys):
    account = _account(1000)
    assert account.withdraw(300) == 1000 - 300
    assert account.balance() == 1000 - 300
    assert "Withdrew 300, new balance: 700" in capsys.readouterr().out


def test_withdraw_insufficient_raises():
    account = _account(100)
    with pytest.raises(InsufficientFundsError):
        account.withdraw(500)
    assert account.balance() == 100


def test_transfer_moves_money(capsys):
    source, target = _account(1000), _account(1000)
    source.transfer(target, 500)
    assert source.balance() == 500
    assert target.balance() == 1500
    out = capsys.readouterr().out
    assert "Locked source account" in out
    assert "Transferred 500 successfully" in out


def test_transfer_insufficient_keeps_balances():
    source, target = _account(100), _account(1000)
    with pytest.raises(InsufficientFundsError):
        source.transfer(target, 500)
    assert (source.balance(), target.balance()) == (100, 1000)


def test_transfer_to_self_rejected():
    account = _account(1000)
    with pytest.raises(ValueError):
        account.transfer(account, 1)
    with pytest.raises(ValueError):
        account.safe_transfer(account, 1)


def test_safe_transfer_in_opposite_directions_finishes():
    account1, account2 = _account(1000), _account(1000)
    t1 = threading.Thread(target=account1.safe_transfer, args=(account2, 500))
    t2 = threading.Thread(target=account2.safe_transfer, args=(account1, 300))
    t1.start()
    t2.start()
    t1.join(timeout=5)
    t2.join(timeout=5)
    assert not t1.is_alive() and not t2.is_alive()
    assert account1.balance() == 1000 - 500 + 300
    assert account1.balance() + account2.balance() == 2000


def test_compare_exchange_success_and_failure():
    cell = AtomicValue(1.0)
    assert cell.compare_exchange(1.0, 2.0) == (True, 1.0)
    assert cell.load() == 2.0
    assert cell.compare_exchange(1.0, 5.0) == (False, 2.0)
    assert cell.load() == 2.0


def test_atomic_multiply_from_threads():
    cell = AtomicValue(1.0)
    threads = [
        threading.Thread(target=atomic_multiply, args=(cell, factor))
        for factor in (2.0, 3.0, 4.0)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert cell.load() == 24.0


def test_atomic_multiply_returns_new_value():
    cell = AtomicValue(3)
    assert atomic_multiply(cell, 5) == cell.load()
    assert cell.load() == 15


def test_stack_is_last_in_first_out():
    stack = LockFreeStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [3, 2, 1]


def test_stack_concurrent_pushes_keep_every_item():
    stack = LockFreeStack()
    threads = [
        threading.Thread(target=lambda k=k: [stack.push(k * 1000 + j) for j in range(200)])
        for k in range(6)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    expected = [k * 1000 + j for k in range(6) for j in range(200)]
    assert sorted(stack) == expected


def test_worker_processes_data(capsys):
    worker = Worker()
    assert worker.main_thread() == "Example data after processing"
    assert worker.processed
    out = capsys.readouterr().out
    assert "Worker is done, data = Example data after processing" in out


def test_factory_consumer_waits_for_producer():
    factory = Factory(production_delay=0, consumption_delay=0)
    taken = []
    consumer = threading.Thread(target=lambda: taken.append(factory.consume_a_cookie()))
    consumer.start()
    produced = factory.produce_a_cookie()
    consumer.join(timeout=5)
    assert not consumer.is_alive()
    assert taken == [produced]
    assert factory.cookies == []


def test_factory_consumes_latest_cookie(capsys):
    factory = Factory(production_delay=0, consumption_delay=0)
    first = factory.produce_a_cookie()
    second = factory.produce_a_cookie()
    assert factory.consume_a_cookie() == second
    assert factory.cookies == [first]
    out = capsys.readouterr().out
    assert f"a cookie {second} is acquired" in out