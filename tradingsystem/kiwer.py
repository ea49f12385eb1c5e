"""Kiwer securities API and the driver adapting it."""

import random

from tradingsystem.driver import StockBrokerDriver


class KiwerAPI:
    """Vendor API of Kiwer securities."""

    def login(self, user_id: str, password: str) -> None:
        print(f"{user_id} login success")

    def buy(self, stock_code: str, count: int, price: int) -> None:
        print(f"{stock_code} : Buy stock ( {price} * {count})")

    def sell(self, stock_code: str, count: int, price: int) -> None:
        print(f"{stock_code} : Sell stock ( {price} * {count})")

    def current_price(self, stock_code: str) -> int:
        """Return a quote between 5000 and 5900 in steps of 100."""
        return random.randrange(10) * 100 + 5000


class KiwerDriver(StockBrokerDriver):
    """Broker driver backed by a KiwerAPI."""

    def __init__(self, api: KiwerAPI) -> None:
        self._api = api

    def login(self, user_id: str, password: str) -> bool:
        self._api.login(user_id, password)
        print(f"{user_id} [KiwerDriver] login success")
        return True

    def buy(self, stock_code: str, quantity: int, price: int) -> bool:
        self._api.buy(stock_code, quantity, price)
        print(f"{stock_code} : [KiwerDriver] Buy stock ( {price} * {quantity})")
        return True

    def sell(self, stock_code: str, quantity: int, price: int) -> bool:
        self._api.sell(stock_code, quantity, price)
        print(f"{stock_code} : [KiwerDriver] Sell stock ( {price} * {quantity})")
        return True

    def get_current_price(self, stock_code: str) -> int:
        price = self._api.current_price(stock_code)
        if price < 0:
            print("Abnormal price. price set to 0")
            price = 0
        return price