import time

import pytest

from tradingsystem.nemo import NemoAPI, NemoDriver

ID = "1234"
STOCK_CODE = "code"


@pytest.fixture
def driver():
    return NemoDriver(NemoAPI())


def test_login_prints_api_and_driver_messages(driver, capsys):
    password = "password"
    assert driver.login(ID, password) is True
    expected = "[NEMO]" + ID + " login GOOD\n" + ID + " [NemoDriver] login success\n"
    assert capsys.readouterr().out == expected


def test_buy_prints_api_and_driver_messages(driver, capsys):
    price = 100
    num = 10
    assert driver.buy(STOCK_CODE, price, num) is True
    expected = (
        f"[NEMO]code buy stock ( price : {price} ) * ( count : {num})\n"
        f"{STOCK_CODE} : [NemoDriver] Buy stock ( {num} * {price})\n"
    )
    assert capsys.readouterr().out == expected


def test_sell_prints_api_and_driver_messages(driver, capsys):
    price = 100
    num = 10
    assert driver.sell(STOCK_CODE, price, num) is True
    expected = (
        f"[NEMO]{STOCK_CODE} sell stock ( price : {price} ) * ( count : {num})\n"
        f"{STOCK_CODE} : [NemoDriver] Sell stock ( {num} * {price})\n"
    )
    assert capsys.readouterr().out == expected


def test_current_price_is_in_quoted_range(driver):
    for _ in range(20):
        price = driver.get_current_price(STOCK_CODE)
        assert 5000 <= price <= 5900
        assert price % 100 == 0


def test_market_price_waits_requested_milliseconds():
    start = time.monotonic()
    price = NemoAPI().get_market_price(STOCK_CODE, 50)
    elapsed = time.monotonic() - start
    assert elapsed >= 0.045
    assert 5000 <= price <= 5900


def test_negative_price_is_clamped_to_zero(capsys):
    class BrokenAPI(NemoAPI):
        def get_market_price(self, stock_code, minute):
            return -7

    driver = NemoDriver(BrokenAPI())
    assert driver.get_current_price(STOCK_CODE) == 0
    assert capsys.readouterr().out == "[NemoDriver] Abnormal price. price set to 0\n"


def test_driver_requests_price_without_delay():
    class RecordingAPI(NemoAPI):
        def __init__(self):
            self.calls = []

        def get_market_price(self, stock_code, minute):
            self.calls.append((stock_code, minute))
            return 5200

    api = RecordingAPI()
    assert NemoDriver(api).get_current_price(STOCK_CODE) == 5200
    assert api.calls == [(STOCK_CODE, 0)]