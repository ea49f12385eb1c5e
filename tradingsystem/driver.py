"""Common interface every stock broker driver implements."""

from abc import ABC, abstractmethod


class StockBrokerDriver(ABC):
    """A broker connection able to log in, trade and quote prices."""

    @abstractmethod
    def login(self, user_id: str, password: str) -> bool:
        """Log in to the broker; return whether it succeeded."""

    @abstractmethod
    def buy(self, stock_code: str, quantity: int, price: int) -> bool:
        """Place a buy order; return whether it was accepted."""

    @abstractmethod
    def sell(self, stock_code: str, quantity: int, price: int) -> bool:
        """Place a sell order; return whether it was accepted."""

    @abstractmethod
    def get_current_price(self, stock_code: str) -> int:
        """Return the current price of a stock."""