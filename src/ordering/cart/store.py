"""In-memory cart storage keyed by customer identifier."""

import itertools
import threading

from ordering.cart.cart import Cart


class CartStore:
    """Owns every Cart and the line item identifier sequence.

    The sequence is shared by all customers and never rewinds, so an identifier
    is not reissued even after the cart holding it is deleted. ``lock`` is a
    single re-entrant lock for the whole store; CartEngine holds it for the
    duration of each operation.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._carts: dict[str, Cart] = {}
        self._line_ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._carts)

    def __contains__(self, customer_id) -> bool:
        return str(customer_id) in self._carts

    def get(self, customer_id) -> Cart | None:
        return self._carts.get(str(customer_id))

    def get_or_create(self, customer_id) -> Cart:
        with self.lock:
            key = str(customer_id)
            cart = self._carts.get(key)
            if cart is None:
                cart = Cart.create(customer_id=key)
                self._carts[key] = cart
            return cart

    def delete(self, customer_id) -> None:
        with self.lock:
            self._carts.pop(str(customer_id), None)

    def next_line_id(self) -> int:
        with self.lock:
            return next(self._line_ids)

    def clear(self) -> None:
        """Drop all carts. The identifier sequence keeps counting."""
        with self.lock:
            self._carts.clear()
