# tradingsystem

A small automatic stock trading library. An `AutoTradingSystem` talks to a
broker through a `StockBrokerDriver`. Drivers are provided for the Kiwer and
Nemo brokerage APIs, plus a `MockDriver` that forwards every call to any
object you supply, which makes it handy in tests.

## Installation

```
pip install .
```

## Modules

- `tradingsystem.driver`: `StockBrokerDriver`, the abstract interface with
  `login`, `buy`, `sell` and `get_current_price`.
- `tradingsystem.kiwer`: `KiwerAPI` and `KiwerDriver`.
- `tradingsystem.nemo`: `NemoAPI` and `NemoDriver`.
- `tradingsystem.mock_driver`: `MockDriver` and the `StockAPI` protocol
  describing the object it wraps.
- `tradingsystem.auto_trading`: `AutoTradingSystem`.

## Usage

```python
from tradingsystem.auto_trading import AutoTradingSystem
from tradingsystem.kiwer import KiwerAPI, KiwerDriver
from tradingsystem.nemo import NemoAPI, NemoDriver

password = "password"
system = AutoTradingSystem(KiwerDriver(KiwerAPI()))
system.login("1234", password)
system.buy("code", 5000, 3)
print(system.get_price("code"))

# Switch to another broker at any time.
system.select_broker(NemoDriver(NemoAPI()))
system.sell("code", 5100, 3)
```

`login`, `buy`, `sell` and `get_price` hand their arguments straight to the
selected driver's `login`, `buy`, `sell` and `get_current_price`, in the
order given, and return what the driver returns.

The Kiwer and Nemo drivers print a line for each call (the API's own line
followed by the driver's), always return `True` from `login`, `buy` and
`sell`, and report a negative quote as `0`. `NemoAPI.get_market_price`
waits the given number of milliseconds (at least 1) before quoting.

### Buying and selling on a trend

`buy_nice_timing(stock_code, available_funds)` reads the price three times,
waiting `poll_interval` seconds (0.2 by default, settable in the constructor
or on the instance) after each reading. If the price never falls, it buys
`available_funds // price` shares at the last price, prints a summary line
and returns `True`; otherwise it returns `False` without trading.

`sell_nice_timing(stock_code, num_shares)` does the opposite: it sells the
given number of shares at the last price only when the three readings never
rise.

### Writing a driver

Subclass `tradingsystem.driver.StockBrokerDriver` and implement `login`,
`buy`, `sell` and `get_current_price`.

### Testing with MockDriver

```python
from unittest.mock import Mock
from tradingsystem.auto_trading import AutoTradingSystem
from tradingsystem.mock_driver import MockDriver

api = Mock()
api.get_current_price.side_effect = [12, 20, 30]
system = AutoTradingSystem(MockDriver(api), poll_interval=0)
assert system.buy_nice_timing("code", 100) is True
```

`MockDriver.get_current_price` prints a warning for a negative quote but
returns it unchanged.

## What it does not do

The bundled `KiwerAPI` and `NemoAPI` do not connect to any brokerage: they
print what they were asked to do and return random quotes between 5000 and
5900 in steps of 100. The package keeps no record of holdings or funds and
provides no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```