"""Integration tests for the ReserveStock and ReturnStock use cases."""

import threading

import pytest

from catalog.application.reserve_stock import ReserveStockHandler
from catalog.application.return_stock import ReturnStockHandler
from catalog.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from catalog.domain.model.product import Product, ProductDetails
from catalog.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _repo(*stock: int) -> FakeProductRepository:
    return FakeProductRepository([
        Product(
            id=i,
            details=ProductDetails(
                name=f"Product {i}",
                organization_id=1,
                price=Money.of("1.00"),
                quantity_in_stock=qty,
            ),
        )
        for i, qty in enumerate(stock, start=1)
    ])


class TestReserveStock:

    def test_reserve_decrements_stock(self):
        repo = _repo(10)
        ReserveStockHandler(repo).handle(1, 4)
        assert repo.get_by_id(1).quantity_in_stock == 6

    def test_reserve_everything(self):
        repo = _repo(10)
        ReserveStockHandler(repo).handle(1, 10)
        assert repo.get_by_id(1).quantity_in_stock == 0

    def test_insufficient_stock_rejected_without_change(self):
        repo = _repo(3)

        with pytest.raises(InsufficientStockError, match="need 4, have 3"):
            ReserveStockHandler(repo).handle(1, 4)

        assert repo.get_by_id(1).quantity_in_stock == 3

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_below_one_rejected(self, quantity):
        repo = _repo(3)
        with pytest.raises(ValidationError, match="must be positive"):
            ReserveStockHandler(repo).handle(1, quantity)

    def test_missing_product_rejected(self):
        with pytest.raises(ProductNotFoundError):
            ReserveStockHandler(_repo()).handle(1, 1)


class TestReturnStock:

    def test_return_increments_stock(self):
        repo = _repo(2)
        ReturnStockHandler(repo).handle(1, 5)
        assert repo.get_by_id(1).quantity_in_stock == 7

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_quantity_below_one_rejected(self, quantity):
        with pytest.raises(ValidationError):
            ReturnStockHandler(_repo(2)).handle(1, quantity)

    def test_missing_product_rejected(self):
        with pytest.raises(ProductNotFoundError):
            ReturnStockHandler(_repo()).handle(1, 1)

    def test_reserve_then_return_restores_stock(self):
        repo = _repo(8)
        ReserveStockHandler(repo).handle(1, 5)
        ReturnStockHandler(repo).handle(1, 5)
        assert repo.get_by_id(1).quantity_in_stock == 8


def _run_concurrently(workers: int, target) -> list[BaseException | None]:
    """Start ``workers`` threads at the same moment; collect each outcome."""
    barrier = threading.Barrier(workers)
    outcomes: list[BaseException | None] = [None] * workers

    def run(index: int) -> None:
        barrier.wait()
        try:
            target()
        except Exception as exc:  # collected for assertions
            outcomes[index] = exc

    threads = [threading.Thread(target=run, args=(i,)) for i in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return outcomes


class TestConcurrentReservations:

    def test_only_one_of_many_full_reservations_succeeds(self):
        repo = _repo(5)
        handler = ReserveStockHandler(repo)

        outcomes = _run_concurrently(8, lambda: handler.handle(1, 5))

        successes = [o for o in outcomes if o is None]
        failures = [o for o in outcomes if o is not None]
        assert len(successes) == 1
        assert len(failures) == 7
        assert all(isinstance(f, InsufficientStockError) for f in failures)
        assert repo.get_by_id(1).quantity_in_stock == 0

    def test_interleaved_reserve_and_return_lose_no_updates(self):
        repo = _repo(50)
        reserve = ReserveStockHandler(repo)
        give_back = ReturnStockHandler(repo)

        def cycle() -> None:
            for _ in range(20):
                reserve.handle(1, 1)
                give_back.handle(1, 1)

        outcomes = _run_concurrently(10, cycle)

        assert outcomes == [None] * 10
        assert repo.get_by_id(1).quantity_in_stock == 50

    def test_different_products_are_independent(self):
        repo = _repo(1, 1)
        handler = ReserveStockHandler(repo)

        with repo.locked(1):
            # Product 2 is not blocked by a held lock on product 1.
            handler.handle(2, 1)

        assert repo.get_by_id(2).quantity_in_stock == 0
        assert repo.get_by_id(1).quantity_in_stock == 1
