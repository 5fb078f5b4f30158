#!/usr/bin/env python3.13

# food palace 🍔
# table ordering, admin approval and billing for a single restaurant counter
#
# money is decimal throughout

import inspect
import signal
import sys
from collections import deque
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache
from typing import Callable, Iterable, Iterator, Sequence

from termcolor import cprint, colored
from colorama import just_fix_windows_console as enable_windows_ansi_interpretation
from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

# fix windows terminal misinterpreting ansi escape sequences
enable_windows_ansi_interpretation()

# constants
DEFAULT_MENU = (
    (1, "Burger", Decimal("100.00")),
    (2, "Pizza", Decimal("500.00")),
    (3, "Pasta", Decimal("350.00")),
)
STDERR_LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

# configuration
class Settings(BaseSettings):
    """runtime settings read from FOOD_PALACE_* env vars or a local .env file"""
    model_config = SettingsConfigDict(
        env_prefix="FOOD_PALACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_file: str = ""
    currency: str = "Rs."
    seed_menu: bool = True

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """return cached settings (created once)"""
    return Settings()

# logging
def setup_logging(level: str = "WARNING", log_file: str = "") -> None:
    """configure loguru sinks; stderr always, rotating file when log_file is set"""
    logger.remove()
    logger.add(sys.stderr, level=level, format=STDERR_LOG_FORMAT)
    if log_file:
        logger.add(
            log_file,
            level=level,
            rotation="3 hours",
            retention="1 day",
            format=FILE_LOG_FORMAT,
        )

# helpers
def safe_int(value: str, minimum: int | None = None):
    """return int value or none if invalid / below minimum"""
    try:
        v = int(value)
        if minimum is not None and v < minimum:
            return None
        return v
    except ValueError:
        return None

def safe_decimal(value: str, minimum: Decimal | None = None):
    """return finite decimal value or none if invalid / below minimum"""
    try:
        v = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not v.is_finite():
        return None
    if minimum is not None and v < minimum:
        return None
    return v

def color_money(amount: Decimal, currency: str = "Rs.") -> str:
    """format amount as green money string"""
    return colored(f"{currency}{amount:.2f}", "green")

def parse_yes_no(answer: str) -> bool | None:
    """map y/yes and n/no to a bool; anything else is none"""
    a = answer.lower().strip()
    if a in ("y", "yes"):
        return True
    if a in ("n", "no"):
        return False
    return None

def parse_boolean_input(prompt: str, handle_invalid: bool = False) -> bool:
    """parse y/n style input; optionally warn on invalid (blank is a plain no)"""
    answer = parse_yes_no(prompt)
    if answer is None:
        if handle_invalid and prompt.strip():
            cprint("invalid input, taken as no.", "red")
        return False
    return answer

# price index
@dataclass(eq=False)
class PriceIndexNode:
    """avl node keyed by price"""
    price: Decimal
    name: str
    left: "PriceIndexNode | None" = None
    right: "PriceIndexNode | None" = None
    height: int = 1

class PriceIndex:
    """avl tree mapping price -> item name

    the first name inserted at a price wins; later inserts at the same price
    are ignored. there is no delete, so the index only ever grows.
    """
    def __init__(self):
        self.root: PriceIndexNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[Decimal, str]]:
        """in-order (price, name) pairs"""
        stack: list[PriceIndexNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.price, node.name
            node = node.right

    @property
    def height(self) -> int:
        return self._height(self.root)

    @staticmethod
    def _height(node: PriceIndexNode | None) -> int:
        return node.height if node is not None else 0

    def _balance(self, node: PriceIndexNode | None) -> int:
        if node is None:
            return 0
        return self._height(node.left) - self._height(node.right)

    def _update_height(self, node: PriceIndexNode):
        node.height = 1 + max(self._height(node.left), self._height(node.right))

    def _rotate_right(self, y: PriceIndexNode) -> PriceIndexNode:
        x = y.left
        middle = x.right
        x.right = y
        y.left = middle
        self._update_height(y)
        self._update_height(x)
        return x

    def _rotate_left(self, x: PriceIndexNode) -> PriceIndexNode:
        y = x.right
        middle = y.left
        y.left = x
        x.right = middle
        self._update_height(x)
        self._update_height(y)
        return y

    def _insert(self, node: PriceIndexNode | None, price: Decimal, name: str) -> PriceIndexNode:
        """insert below node and return the new subtree root"""
        if node is None:
            self._size += 1
            return PriceIndexNode(price, name)

        if price < node.price:
            node.left = self._insert(node.left, price, name)
        elif price > node.price:
            node.right = self._insert(node.right, price, name)
        else:
            logger.debug("price {} already indexed as {!r}, ignoring {!r}", price, node.name, name)
            return node

        self._update_height(node)
        balance = self._balance(node)

        # left-left
        if balance > 1 and price < node.left.price:
            return self._rotate_right(node)
        # right-right
        if balance < -1 and price > node.right.price:
            return self._rotate_left(node)
        # left-right
        if balance > 1 and price > node.left.price:
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        # right-left
        if balance < -1 and price < node.right.price:
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    def insert(self, price: Decimal, name: str):
        """add (price, name) unless the price is already present"""
        self.root = self._insert(self.root, price, name)

    def search(self, price: Decimal) -> str | None:
        """exact-match lookup; none when the price is not indexed"""
        node = self.root
        while node is not None:
            if price == node.price:
                return node.name
            node = node.left if price < node.price else node.right
        return None

# domain models
@dataclass(frozen=True)
class MenuEntry:
    """menu catalog entry"""
    item_id: int
    name: str
    price: Decimal

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("price must not be negative")

class OrderStatus(Enum):
    """order lifecycle; approved and rejected are terminal"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class Decision(Enum):
    """admin verdict on a pending order"""
    ACCEPT = "accept"
    REJECT = "reject"

@dataclass(frozen=True)
class OrderItemLine:
    """ordered item with the unit price captured when the order was placed"""
    name: str
    quantity: int
    unit_price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.unit_price

@dataclass(eq=False)
class Order:
    """a table's order"""
    table_number: int
    items: list[OrderItemLine] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING

    @property
    def total(self) -> Decimal:
        """sum of line subtotals"""
        return sum((line.subtotal for line in self.items), Decimal("0"))

    def decide(self, decision: Decision):
        """move a pending order to approved / rejected"""
        if self.status is not OrderStatus.PENDING:
            raise ValueError(f"order for table {self.table_number} is already {self.status.value}")
        self.status = OrderStatus.APPROVED if decision is Decision.ACCEPT else OrderStatus.REJECTED

@dataclass(frozen=True)
class PlacementResult:
    """placed order plus the item ids that did not match the menu"""
    order: Order
    unresolved: tuple[int, ...] = ()

# sorting
def sort_by_price(entries: Sequence[MenuEntry]) -> list[MenuEntry]:
    """stable quicksort by ascending price, pivoting on the last element

    partitions are kept on an explicit stack, so sorted input costs time but
    never call depth.
    """
    result: list[MenuEntry] = []
    # (entries, settled) pairs; settled runs are already in final order
    stack: list[tuple[list[MenuEntry], bool]] = [(list(entries), False)]
    while stack:
        part, settled = stack.pop()
        if settled or len(part) <= 1:
            result.extend(part)
            continue
        pivot = part[-1].price
        lower = [e for e in part if e.price < pivot]
        equal = [e for e in part if e.price == pivot]
        higher = [e for e in part if e.price > pivot]
        stack.append((higher, False))
        stack.append((equal, True))
        stack.append((lower, False))
    return result

# catalog
class Catalog:
    """menu entries in insertion order, mirrored into a price index

    the index is best-effort: remove() leaves the removed price searchable,
    and a second entry at an already indexed price is never searchable.
    """
    def __init__(self):
        self.entries: list[MenuEntry] = []
        self.index = PriceIndex()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[MenuEntry]:
        return iter(list(self.entries))

    def add(self, entry: MenuEntry):
        """append entry and index its price"""
        self.entries.append(entry)
        self.index.insert(entry.price, entry.name)

    def remove(self, item_id: int) -> bool:
        """drop the first entry with this id; the index is left as is"""
        for i, entry in enumerate(self.entries):
            if entry.item_id == item_id:
                del self.entries[i]
                return True
        return False

    def sorted_view(self) -> list[MenuEntry]:
        return sort_by_price(self.entries)

    def find(self, item_id: int, view: Sequence[MenuEntry] | None = None) -> MenuEntry | None:
        """first entry with this id in price order; pass a sorted view to reuse it"""
        if view is None:
            view = self.sorted_view()
        return next((e for e in view if e.item_id == item_id), None)

    def search_by_price(self, price: Decimal) -> str | None:
        return self.index.search(price)

# order pipeline
class OrderPipeline:
    """pending orders (fifo), decided orders (lifo) and accepted revenue"""
    def __init__(self):
        self._pending: deque[Order] = deque()
        self._history: list[Order] = []
        self._revenue = Decimal("0")

    @property
    def revenue(self) -> Decimal:
        return self._revenue

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def place_order(self, table_number: int, lines: Iterable[OrderItemLine]) -> Order:
        """enqueue a new pending order"""
        order = Order(table_number, list(lines))
        self._pending.append(order)
        return order

    def peek(self) -> Order | None:
        """next order to be processed, if any"""
        return self._pending[0] if self._pending else None

    def process_next(self, decision: Decision) -> Order | None:
        """decide the oldest pending order; none when nothing is pending"""
        if not self._pending:
            return None
        order = self._pending.popleft()
        order.decide(decision)
        if order.status is OrderStatus.APPROVED:
            self._revenue += order.total
        self._history.append(order)
        return order

    def pending(self) -> Iterator[Order]:
        """oldest first"""
        return iter(list(self._pending))

    def history(self) -> Iterator[Order]:
        """most recently decided first"""
        return iter(self._history[::-1])

# service
class RestaurantService:
    """application state and the operations exposed to the front desk"""
    def __init__(self, catalog: Catalog | None = None, pipeline: OrderPipeline | None = None):
        self.catalog = catalog if catalog is not None else Catalog()
        self.pipeline = pipeline if pipeline is not None else OrderPipeline()

    def seed_default_menu(self):
        """load the house menu"""
        for item_id, name, price in DEFAULT_MENU:
            self.add_menu_entry(item_id, name, price)

    # menu
    def add_menu_entry(self, item_id: int, name: str, price: Decimal) -> MenuEntry:
        entry = MenuEntry(item_id, name, price)
        indexed_as = self.catalog.search_by_price(price)
        self.catalog.add(entry)
        if indexed_as is not None:
            logger.info("price {} stays indexed as {!r}; {!r} is not searchable by price", price, indexed_as, name)
        logger.info("menu entry #{} {!r} added at {}", item_id, name, price)
        return entry

    def remove_menu_entry(self, item_id: int) -> bool:
        removed = self.catalog.remove(item_id)
        if removed:
            logger.info("menu entry #{} removed", item_id)
        else:
            logger.info("menu entry #{} not found", item_id)
        return removed

    def list_menu_sorted(self) -> list[MenuEntry]:
        return self.catalog.sorted_view()

    def search_by_price(self, price: Decimal) -> str | None:
        return self.catalog.search_by_price(price)

    # orders
    def resolve_line(self, item_id: int, quantity: int,
                     menu: Sequence[MenuEntry] | None = None) -> OrderItemLine | None:
        """snapshot name and price for a menu item; none for unknown ids"""
        entry = self.catalog.find(item_id, menu)
        if entry is None:
            return None
        return OrderItemLine(entry.name, quantity, entry.price)

    def place_order(self, table_number: int, requests: Iterable[tuple[int, int]]) -> PlacementResult:
        """resolve (item_id, quantity) requests and enqueue the order"""
        lines: list[OrderItemLine] = []
        unresolved: list[int] = []
        menu = self.catalog.sorted_view()
        for item_id, quantity in requests:
            line = self.resolve_line(item_id, quantity, menu)
            if line is None:
                logger.warning("table {}: item #{} is not on the menu, line dropped", table_number, item_id)
                unresolved.append(item_id)
                continue
            lines.append(line)
        order = self.pipeline.place_order(table_number, lines)
        logger.info("table {} placed an order with {} line(s)", table_number, len(lines))
        return PlacementResult(order, tuple(unresolved))

    def next_pending_order(self) -> Order | None:
        return self.pipeline.peek()

    def process_next_order(self, decision: Decision) -> Order | None:
        order = self.pipeline.process_next(decision)
        if order is None:
            logger.warning("no pending orders to process")
            return None
        logger.info("table {} order {} (total {})", order.table_number, order.status.value, order.total)
        return order

    def list_pending_orders(self) -> list[Order]:
        return list(self.pipeline.pending())

    def list_order_history(self) -> list[Order]:
        return list(self.pipeline.history())

    def get_revenue(self) -> Decimal:
        return self.pipeline.revenue

# terminal collaborator
class Terminal:
    """console input/output: validated primitive reads and formatted listings"""
    def __init__(self, currency: str = "Rs."):
        self.currency = currency

    def ask(self, prompt: str) -> str:
        """raw line from stdin (EOFError propagates)"""
        return input(prompt)

    # input
    def read_line(self, prompt: str) -> str:
        return self.ask(colored(prompt, "magenta")).strip()

    def read_int(self, prompt: str, minimum: int | None = None) -> int:
        """re-prompt until a whole number (>= minimum) is entered"""
        while True:
            value = safe_int(self.read_line(prompt), minimum)
            if value is not None:
                return value
            if minimum is None:
                cprint("please enter a whole number", "red")
            else:
                cprint(f"please enter a whole number >= {minimum}", "red")

    def read_decimal(self, prompt: str, minimum: Decimal | None = None) -> Decimal:
        """re-prompt until a number (>= minimum) is entered"""
        while True:
            value = safe_decimal(self.read_line(prompt), minimum)
            if value is not None:
                return value
            if minimum is None:
                cprint("please enter a number", "red")
            else:
                cprint(f"please enter a number >= {minimum}", "red")

    def read_yes_no(self, prompt: str) -> bool:
        while True:
            answer = parse_yes_no(self.read_line(prompt))
            if answer is not None:
                return answer
            cprint("please answer yes or no", "red")

    def confirm(self, prompt: str) -> bool:
        """(y/N) style confirmation; anything but yes means no"""
        return parse_boolean_input(self.ask(colored(prompt, "yellow")), handle_invalid=True)

    # output
    def money(self, amount: Decimal) -> str:
        return color_money(amount, self.currency)

    def show_menu(self, entries: Sequence[MenuEntry]):
        """price-sorted menu listing"""
        cprint("our food menu", None, attrs=["bold"])
        if not entries:
            cprint("menu empty", "red"); return
        for entry in entries:
            print(f"  {colored(str(entry.item_id), 'blue')}. {entry.name} - {self.money(entry.price)}")

    def show_pending(self, orders: Sequence[Order]):
        """current orders, name x quantity only"""
        cprint("current orders:", "green", attrs=["bold"])
        for order in orders:
            cprint(f"table {order.table_number}:", "green")
            for line in order.items:
                print(f"\t{line.name} x{line.quantity}")
            print("-" * 16)

    def show_order_lines(self, order: Order):
        cprint(f"table {order.table_number}:", "green")
        if not order.items:
            print("\tno items")
        for line in order.items:
            print(f"\t{line.name} x{line.quantity} - {self.money(line.subtotal)}")

    def show_bill(self, pending: Sequence[Order], history: Sequence[Order]):
        """customer-facing bills for waiting and decided orders"""
        cprint("order bills:", "green", attrs=["bold"])
        for order in pending:
            self.show_order_lines(order)
            cprint("status: waiting for admin approval", "yellow")
            print("-" * 27)
        for order in history:
            self.show_order_lines(order)
            if order.status is OrderStatus.REJECTED:
                cprint("status: sorry, we can't proceed with your order", "red")
            elif order.status is OrderStatus.APPROVED:
                cprint("status: admin approved your order", "green")
                print(f"total: {self.money(order.total)}")
            print("-" * 27)

    def show_history(self, history: Sequence[Order]):
        """decided orders, newest first"""
        cprint("order history:", "green", attrs=["bold"])
        for order in history:
            status = colored(order.status.value, "green" if order.status is OrderStatus.APPROVED else "red")
            print(f"table {order.table_number}: {status} - {self.money(order.total)}")

    def show_billing_summary(self, history: Sequence[Order], revenue: Decimal):
        """order summaries with the day's income"""
        cprint("order summaries:", "green", attrs=["bold"])
        for order in history:
            self.show_order_lines(order)
            print(f"total: {self.money(order.total)}")
            print("-" * 27)
        self.show_revenue(revenue)

    def show_search_result(self, price: Decimal, name: str | None):
        if name is None:
            cprint("item not found.", "red"); return
        cprint(f"found: {name} - {self.currency}{price:.2f}", "green")

    def show_revenue(self, revenue: Decimal):
        cprint(f"total income of the day: {self.money(revenue)}", None, attrs=["bold"])

# front desk actions
class FrontDesk:
    """interactive handlers: prompt through the terminal, act through the service"""
    def __init__(self, service: RestaurantService, terminal: Terminal):
        self.service = service
        self.terminal = terminal

    # customer section
    def show_menu(self):
        """print menu sorted by price"""
        self.terminal.show_menu(self.service.list_menu_sorted())

    def place_order(self):
        """take a table's order line by line"""
        self.show_menu()
        table_number = self.terminal.read_int("enter table number: ")
        requests: list[tuple[int, int]] = []
        while True:
            item_id = self.terminal.read_int("enter item id: ")
            quantity = self.terminal.read_int("enter quantity: ", minimum=1)
            requests.append((item_id, quantity))
            if not self.terminal.read_yes_no("do you need anything else? (yes/no): "):
                break
        result = self.service.place_order(table_number, requests)
        for item_id in result.unresolved:
            cprint(f"invalid item id #{item_id}, skipped", "red")
        cprint(f"order for table {table_number} sent for admin approval", "green")

    def list_pending(self):
        """show orders waiting for approval"""
        orders = self.service.list_pending_orders()
        if not orders:
            cprint("no pending orders", "red"); return
        self.terminal.show_pending(orders)

    def display_bill(self):
        """show bills for every order"""
        pending = self.service.list_pending_orders()
        history = self.service.list_order_history()
        if not (pending or history):
            cprint("no orders yet", "red"); return
        self.terminal.show_bill(pending, history)

    def search_by_price(self, price: str | None = None):
        """look up a menu item by exact price"""
        if price is None:
            amount = self.terminal.read_decimal("enter the price to search for: ", minimum=Decimal("0"))
        else:
            amount = safe_decimal(price, minimum=Decimal("0"))
            if amount is None:
                cprint("invalid price", "red"); return
        self.terminal.show_search_result(amount, self.service.search_by_price(amount))

    # admin section
    def add_menu_item(self, item_id: str | None = None, name: str | None = None, price: str | None = None):
        """add a menu entry"""
        if item_id is None:
            iid = self.terminal.read_int("enter item id: ")
        else:
            iid = safe_int(item_id)
            if iid is None:
                cprint("invalid item id", "red"); return
        if name is None:
            name = self.terminal.read_line("enter item name: ")
        if not name:
            cprint("item name required", "red"); return
        if price is None:
            amount = self.terminal.read_decimal("enter price: ", minimum=Decimal("0"))
        else:
            amount = safe_decimal(price, minimum=Decimal("0"))
            if amount is None:
                cprint("invalid price", "red"); return
        self.service.add_menu_entry(iid, name, amount)
        cprint("item added successfully!", "green")

    def remove_menu_item(self, item_id: str | None = None):
        """remove a menu entry by id"""
        if item_id is None:
            iid = self.terminal.read_int("enter item id to remove: ")
        else:
            iid = safe_int(item_id)
            if iid is None:
                cprint("invalid item id", "red"); return
        if self.service.remove_menu_entry(iid):
            cprint("item removed successfully!", "green")
        else:
            cprint("item not found!", "red")

    def process_orders(self):
        """accept or reject every pending order, oldest first"""
        if self.service.next_pending_order() is None:
            cprint("no pending orders", "yellow"); return
        while (order := self.service.next_pending_order()) is not None:
            cprint(f"processing order for table {order.table_number}", None, attrs=["bold"])
            self.terminal.show_order_lines(order)
            accept = self.terminal.read_yes_no("do you accept this order? (yes/no): ")
            decided = self.service.process_next_order(Decision.ACCEPT if accept else Decision.REJECT)
            if decided.status is OrderStatus.APPROVED:
                cprint("order accepted and added to history.", "green")
            else:
                cprint("order rejected.", "yellow")

    def show_history(self):
        """list decided orders, newest first"""
        history = self.service.list_order_history()
        if not history:
            cprint("no processed orders", "red"); return
        self.terminal.show_history(history)

    def billing_summary(self):
        """order summaries and the day's income"""
        self.terminal.show_billing_summary(self.service.list_order_history(), self.service.get_revenue())

    def show_revenue(self):
        """print accepted revenue so far"""
        self.terminal.show_revenue(self.service.get_revenue())

# command infrastructure
class Section(Enum):
    """help grouping"""
    CUSTOMER = "customer"
    ADMIN = "admin"

class Action(Enum):
    """command name for each front desk operation"""
    LIST_MENU_SORTED = "menu"
    PLACE_ORDER = "order place"
    LIST_PENDING_ORDERS = "order list"
    DISPLAY_BILL = "order bill"
    SEARCH_BY_PRICE = "search price"
    ADD_MENU_ENTRY = "admin menu add"
    REMOVE_MENU_ENTRY = "admin menu remove"
    SHOW_MENU_ADMIN = "admin menu show"
    PROCESS_NEXT_ORDER = "admin orders process"
    LIST_ORDER_HISTORY = "admin orders history"
    BILLING_SUMMARY = "admin billing"
    GET_REVENUE = "admin revenue"

class Command:
    """bind a command name to a function"""
    def __init__(self, name: str, function: Callable, description: str,
                 section: Section | None = None):
        self.name = name
        self._fn = function
        self.description = description
        self.section = section

    def execute(self, tokens: list[str]):
        """validate arg count and invoke function"""
        sig = inspect.signature(self._fn)
        params = list(sig.parameters.values())
        required = sum(
            p.default == inspect.Parameter.empty and p.kind in (
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                inspect.Parameter.POSITIONAL_ONLY
            )
            for p in params
        )
        if not (required <= len(tokens) <= len(params)):
            cprint(f"invalid args for '{self.name}' (expected {required}-{len(params)}, got {len(tokens)})", "red")
            return
        return self._fn(*tokens)

class CommandParser:
    """simple repl parser"""
    def __init__(self, terminal: Terminal):
        self.terminal = terminal
        self.commands: list[Command] = [
            Command("help", self.show_help, "show this help"),
            Command("h", self.show_help, "alias help"),
            Command("quit", self.quit, "exit program"),
            Command("exit", lambda: cprint("use quit to exit", "yellow"), "alias quit"),
        ]

    def parse_and_execute(self, input_str: str):
        """parse the raw input string and attempt to execute a command"""
        tokens = input_str.strip().split()
        if not tokens:
            return
        for cmd in self.commands:
            parts = cmd.name.split()
            if tokens[:len(parts)] != parts:
                continue
            args = tokens[len(parts):]
            return cmd.execute(args)
        cprint("unknown command. type 'help'", "red")

    def show_help(self):
        """display help grouped by section"""
        cprint("available commands:", "green", attrs=["bold"])
        width = max(len(c.name) for c in self.commands)
        for section in (None, Section.CUSTOMER, Section.ADMIN):
            if section is not None:
                cprint(f"\n{section.value} section:", "green", attrs=["bold"])
            for cmd in self.commands:
                if cmd.section is not section:
                    continue
                sig = inspect.signature(cmd._fn)
                params = " ".join(
                    f"<{p}>" if prm.default == inspect.Parameter.empty else f"[{p}]"
                    for p, prm in sig.parameters.items()
                )
                line = f"{colored(cmd.name, 'blue')} {colored(params, 'cyan')}".strip()
                print(line.ljust(width + 25), "-", cmd.description)

    def quit(self):
        """interactive quit confirmation"""
        if self.terminal.confirm("are you sure you want to quit? (y/N): "):
            cprint("okay, see ya!", "green")
            sys.exit(0)
        cprint("continuing...", "green")

    def start_repl(self):
        """main repl loop"""
        while True:
            try:
                user_input = self.terminal.ask(colored("\n> ", "blue")).strip()
                if user_input:
                    self.parse_and_execute(user_input)
            except EOFError:
                print()
                break

# application wiring
class Application:
    """bootstrap objects & build the command table"""
    def __init__(self, settings: Settings | None = None, terminal: Terminal | None = None):
        self.settings = settings if settings is not None else get_settings()
        setup_logging(self.settings.log_level, self.settings.log_file)
        self.service = RestaurantService()
        if self.settings.seed_menu:
            self.service.seed_default_menu()
        self.terminal = terminal if terminal is not None else Terminal(self.settings.currency)
        self.front_desk = FrontDesk(self.service, self.terminal)
        self.parser = CommandParser(self.terminal)

        desk = self.front_desk
        self.dispatch: dict[Action, tuple[Callable, str, Section]] = {
            Action.LIST_MENU_SORTED: (desk.show_menu, "show menu sorted by price", Section.CUSTOMER),
            Action.PLACE_ORDER: (desk.place_order, "place your order", Section.CUSTOMER),
            Action.LIST_PENDING_ORDERS: (desk.list_pending, "show ordered food items", Section.CUSTOMER),
            Action.DISPLAY_BILL: (desk.display_bill, "display the bill", Section.CUSTOMER),
            Action.SEARCH_BY_PRICE: (desk.search_by_price, "search item by price", Section.CUSTOMER),
            Action.ADD_MENU_ENTRY: (desk.add_menu_item, "add menu item", Section.ADMIN),
            Action.REMOVE_MENU_ENTRY: (desk.remove_menu_item, "remove menu item", Section.ADMIN),
            Action.SHOW_MENU_ADMIN: (desk.show_menu, "show menu", Section.ADMIN),
            Action.PROCESS_NEXT_ORDER: (desk.process_orders, "accept / reject pending orders", Section.ADMIN),
            Action.LIST_ORDER_HISTORY: (desk.show_history, "processed orders, newest first", Section.ADMIN),
            Action.BILLING_SUMMARY: (desk.billing_summary, "billing system", Section.ADMIN),
            Action.GET_REVENUE: (desk.show_revenue, "total income of the day", Section.ADMIN),
        }
        self.parser.commands += [
            Command(action.value, fn, description, section)
            for action, (fn, description, section) in self.dispatch.items()
        ]

    def run(self, *args: str):
        """greet, run any command given on the command line, then start the repl"""
        cprint("""
==================== welcome to food palace ====================
""", "green", attrs=["bold"])

        print("""customers can browse the menu, place orders and check their bill;
admins manage the menu, approve orders and see the day's income.

for more information, type 'help' or 'h' at any time.
to exit the program, type 'quit'.""")

        if args:
            self.parser.parse_and_execute(" ".join(args))
        self.parser.start_repl()

# entry point
def main():
    """entrypoint wrapper"""
    signal.signal(signal.SIGINT, SignalHandler.sigint)
    Application().run(*sys.argv[1:])

# signal handler
class SignalHandler:
    """custom ctrl+c handler to nag user politely"""
    @staticmethod
    def sigint(_, __):
        """handle ctrl+c"""
        cprint("\nnext time, use quit!", "yellow")
        sys.exit(0)

if __name__ == "__main__":
    main()
