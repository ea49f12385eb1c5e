"""Driver that forwards every call to a replaceable stock API object."""

from typing import Protocol

from tradingsystem.driver import StockBrokerDriver


class StockAPI(Protocol):
    """Shape of the API a MockDriver delegates to."""

    def login(self, user_id: str, password: str) -> bool: ...

    def buy(self, stock_code: str, quantity: int, price: int) -> bool: ...

    def sell(self, stock_code: str, quantity: int, price: int) -> bool: ...

    def get_current_price(self, stock_code: str) -> int: ...


class MockDriver(StockBrokerDriver):
    """Broker driver whose results come from the wrapped API object."""

    def __init__(self, api: StockAPI) -> None:
        self._api = api

    def login(self, user_id: str, password: str) -> bool:
        result = self._api.login(user_id, password)
        print(f"{user_id} [Mock Driver] login success")
        return result

    def buy(self, stock_code: str, quantity: int, price: int) -> bool:
        result = self._api.buy(stock_code, quantity, price)
        print(f"{stock_code} : [Mock Driver] Buy stock ( {price} * {quantity})")
        return result

    def sell(self, stock_code: str, quantity: int, price: int) -> bool:
        result = self._api.sell(stock_code, quantity, price)
        print(f"{stock_code} : [Mock Driver] Sell stock ( {price} * {quantity})")
        return result

    def get_current_price(self, stock_code: str) -> int:
        price = self._api.get_current_price(stock_code)
        if price < 0:
            print(f"{stock_code} : [Warning] Mock current price under zero ( {price} )")
        return price