"""Tests for the restaurant service operations."""

from decimal import Decimal

from food_palace import Decision, OrderStatus, RestaurantService


class TestMenuOperations:
    """Add, remove, list and search through the service."""

    def test_seeded_menu_sorted(self, service):
        assert [e.name for e in service.list_menu_sorted()] == ["Burger", "Pasta", "Pizza"]

    def test_search_scenario(self, service):
        assert service.search_by_price(Decimal("350.00")) == "Pasta"
        assert service.search_by_price(Decimal("999.00")) is None

    def test_remove_then_search_still_finds_item(self, service):
        assert service.remove_menu_entry(3) is True
        assert "Pasta" not in [e.name for e in service.list_menu_sorted()]
        assert service.search_by_price(Decimal("350.00")) == "Pasta"

    def test_remove_unknown_id(self, service):
        assert service.remove_menu_entry(99) is False
        assert len(service.list_menu_sorted()) == 3

    def test_add_entry(self):
        service = RestaurantService()
        entry = service.add_menu_entry(10, "Tea", Decimal("30"))
        assert entry.name == "Tea"
        assert service.list_menu_sorted() == [entry]
        assert service.search_by_price(Decimal("30.00")) == "Tea"


class TestOrderOperations:
    """Placing, processing and billing orders through the service."""

    def test_place_order_snapshots_lines(self, service):
        result = service.place_order(7, [(1, 2), (3, 1)])
        order = result.order
        assert result.unresolved == ()
        assert order.table_number == 7
        assert [(l.name, l.quantity, l.unit_price) for l in order.items] == [
            ("Burger", 2, Decimal("100.00")),
            ("Pasta", 1, Decimal("350.00")),
        ]
        assert service.list_pending_orders() == [order]

    def test_unknown_items_are_dropped(self, service):
        result = service.place_order(2, [(42, 1), (2, 1), (43, 3)])
        assert result.unresolved == (42, 43)
        assert [l.name for l in result.order.items] == ["Pizza"]

    def test_order_with_only_unknown_items_is_still_queued(self, service):
        result = service.place_order(2, [(42, 1)])
        assert result.order.items == []
        assert service.list_pending_orders() == [result.order]

    def test_later_price_change_does_not_touch_placed_order(self, service):
        order = service.place_order(1, [(1, 1)]).order
        service.remove_menu_entry(1)
        service.add_menu_entry(1, "Burger", Decimal("150.00"))
        assert order.total == Decimal("100.00")

    def test_revenue_scenario(self, service):
        service.place_order(1, [(1, 2)])
        service.place_order(2, [(2, 1)])
        service.place_order(3, [(3, 1)])
        a = service.process_next_order(Decision.ACCEPT)
        b = service.process_next_order(Decision.REJECT)
        c = service.process_next_order(Decision.ACCEPT)
        assert (a.table_number, b.table_number, c.table_number) == (1, 2, 3)
        assert b.status is OrderStatus.REJECTED
        assert service.get_revenue() == Decimal("550.00")
        assert [o.table_number for o in service.list_order_history()] == [3, 2, 1]
        assert service.list_pending_orders() == []

    def test_process_with_nothing_pending(self, service):
        assert service.next_pending_order() is None
        assert service.process_next_order(Decision.ACCEPT) is None
        assert service.get_revenue() == 0


class TestLargeMenu:
    """A long menu entered in price order still lists and resolves."""

    def test_ascending_menu(self):
        service = RestaurantService()
        for n in range(1, 1201):
            service.add_menu_entry(n, f"dish {n}", Decimal(n))
        menu = service.list_menu_sorted()
        assert [e.item_id for e in menu] == list(range(1, 1201))
        result = service.place_order(1, [(1200, 1), (1, 2), (5000, 1)])
        assert [l.name for l in result.order.items] == ["dish 1200", "dish 1"]
        assert result.unresolved == (5000,)
