"""Nemo securities API and the driver adapting it."""

import random
import time

from tradingsystem.driver import StockBrokerDriver


class NemoAPI:
    """Vendor API of Nemo securities."""

    def certification(self, user_id: str, password: str) -> None:
        print(f"[NEMO]{user_id} login GOOD")

    def purchasing_stock(self, stock_code: str, price: int, count: int) -> None:
        print(f"[NEMO]{stock_code} buy stock ( price : {price} ) * ( count : {count})")

    def selling_stock(self, stock_code: str, price: int, count: int) -> None:
        print(f"[NEMO]{stock_code} sell stock ( price : {price} ) * ( count : {count})")

    def get_market_price(self, stock_code: str, minute: int) -> int:
        """Wait ``minute`` milliseconds (at least 1), then return a quote."""
        if minute <= 0:
            minute = 1
        time.sleep(minute / 1000)
        return random.randrange(10) * 100 + 5000


class NemoDriver(StockBrokerDriver):
    """Broker driver backed by a NemoAPI."""

    def __init__(self, api: NemoAPI) -> None:
        self._api = api

    def login(self, user_id: str, password: str) -> bool:
        self._api.certification(user_id, password)
        print(f"{user_id} [NemoDriver] login success")
        return True

    def buy(self, stock_code: str, quantity: int, price: int) -> bool:
        self._api.purchasing_stock(stock_code, quantity, price)
        print(f"{stock_code} : [NemoDriver] Buy stock ( {price} * {quantity})")
        return True

    def sell(self, stock_code: str, quantity: int, price: int) -> bool:
        self._api.selling_stock(stock_code, quantity, price)
        print(f"{stock_code} : [NemoDriver] Sell stock ( {price} * {quantity})")
        return True

    def get_current_price(self, stock_code: str) -> int:
        price = self._api.get_market_price(stock_code, 0)
        if price < 0:
            print("[NemoDriver] Abnormal price. price set to 0")
            price = 0
        return price