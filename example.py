from fx_trend import FxTrend, order_rates, slopes

print(FxTrend.__version__)  # 0.1.0

# Default usage: exchangeratesapi.io, EUR target, 7 day window
fx = FxTrend()

# Latest GBP -> EUR rate plus whether to convert now
result = fx.convert("GBP")
print(result.as_payload())
# => {'from': 'GBP', 'to': 'EUR', 'rate': 1.163061177, 'recommendation': 'convert'}

# Trend over a longer window
print(fx.recommend("GBP", days=30))

# Slopes for several currencies quoted in EUR
print(fx.trend_slopes("EUR", ["USD", "GBP"]))

# EUR per unit instead of unit per EUR
print(fx.inverse_rates("EUR", ["USD", "GBP"]))

# The engine works on plain dicts too
series = {
    "2019-11-18": {"USD": 1.1061},
    "2019-11-15": {"USD": 1.1034},
    "2019-11-19": {"USD": 1.1077},
}
print(slopes(order_rates(series), ["USD"]))
