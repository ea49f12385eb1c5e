"""Automatic trading on top of a selectable broker driver."""

import time
from typing import Optional

from tradingsystem.driver import StockBrokerDriver

_SAMPLES = 3


class AutoTradingSystem:
    """Trades through a broker driver, buying on rises and selling on falls."""

    def __init__(self, driver: StockBrokerDriver, poll_interval: float = 0.2) -> None:
        self._driver = driver
        self.poll_interval = poll_interval

    def select_broker(self, driver: StockBrokerDriver) -> None:
        self._driver = driver

    def login(self, user_id: str, password: str) -> bool:
        return self._driver.login(user_id, password)

    def buy(self, stock_code: str, price: int, num_share: int) -> bool:
        return self._driver.buy(stock_code, price, num_share)

    def sell(self, stock_code: str, price: int, num_share: int) -> bool:
        return self._driver.sell(stock_code, price, num_share)

    def get_price(self, stock_code: str) -> int:
        return self._driver.get_current_price(stock_code)

    def buy_nice_timing(self, stock_code: str, available_funds: int) -> bool:
        """Buy with all funds if the price does not fall over three readings."""
        price = self._rising_price(stock_code)
        if price is None:
            return False
        shares = available_funds // price
        self.buy(stock_code, price, shares)
        print(f"Bought {shares} shares at {price} dollars automatically!")
        return True

    def sell_nice_timing(self, stock_code: str, num_shares: int) -> bool:
        """Sell the shares if the price does not rise over three readings."""
        price = self._falling_price(stock_code)
        if price is None:
            return False
        self.sell(stock_code, price, num_shares)
        print(f"Sold {num_shares} shares at {price} dollars automatically!")
        return True

    def _rising_price(self, stock_code: str) -> Optional[int]:
        previous = 0
        current = 0
        for _ in range(_SAMPLES):
            current = self.get_price(stock_code)
            if current < previous:
                return None
            previous = current
            time.sleep(self.poll_interval)
        return current

    def _falling_price(self, stock_code: str) -> Optional[int]:
        previous: Optional[int] = None
        current = 0
        for _ in range(_SAMPLES):
            current = self.get_price(stock_code)
            if previous is not None and current > previous:
                return None
            previous = current
            time.sleep(self.poll_interval)
        return current