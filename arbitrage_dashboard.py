import pandas as pd
import streamlit as st
from loguru import logger

from tokenarb.config import settings
from tokenarb.logs import setup_logging
from tokenarb.services import coingecko
from tokenarb.services.arbitrage import find_best_opportunity
from tokenarb.services.presentation import (
    coins_frame, format_percent, format_usd, price_frame, tickers_frame,
)
from tokenarb.services.simulator import simulate
from tokenarb.schemas.simulation import SimulationError

setup_logging(settings.log_level)

st.set_page_config(page_title="Token Arbitrage Viewer", layout="wide")
st.title("🔎 Crypto Token Lookup")
st.caption("Search a token by name or symbol.")

def _highlight(row):
    colour = {"buy": "background-color: #14532d", "sell": "background-color: #7f1d1d"}.get(row["role"], "")
    return [colour] * len(row)

with st.form("search"):
    term = st.text_input("Token", placeholder="e.g. Bitcoin, ETH or UNI...")
    submitted = st.form_submit_button("Search")

if submitted:
    if not term.strip():
        st.session_state["coins"] = None
        st.error("Enter a token name or symbol.")
    else:
        try:
            with st.spinner("Searching..."):
                st.session_state["coins"] = coingecko.search_coins(term)
            st.session_state["term"] = term
        except coingecko.MarketDataError as e:
            st.session_state["coins"] = None
            st.error(e.message)

coins = st.session_state.get("coins")
if coins is None:
    st.info("Start searching to see results.")
    st.stop()
if not coins:
    st.warning(f'Token "{st.session_state.get("term", "")}" not found.')
    st.stop()

st.subheader("Search results")
st.dataframe(coins_frame(coins), use_container_width=True, hide_index=True)

labels = {f"{c.name} ({c.symbol.upper()}) #{c.market_cap_rank}": c.id for c in coins}
choice = st.selectbox("Token", list(labels.keys()))
coin_id = labels[choice]

try:
    with st.spinner("Loading market data..."):
        detail = coingecko.fetch_coin(coin_id)
        quotes = coingecko.fetch_tickers(coin_id)
except coingecko.MarketDataError as e:
    st.error(e.message)
    st.stop()

head = st.columns([1, 3, 2, 2])
if detail.image_url:
    head[0].image(detail.image_url, width=64)
head[1].markdown(f"### {detail.name} ({detail.symbol.upper()})")
head[2].metric("Price", format_usd(detail.current_price_usd), format_percent(detail.price_change_24h_percent))
head[3].metric("Market cap rank", detail.market_cap_rank or "-")

opp = find_best_opportunity(quotes)
st.subheader("Arbitrage opportunity")
if opp:
    logger.info(f"[dashboard] {coin_id}: spread {opp.spread_percent}%")
    cols = st.columns(3)
    cols[0].metric(f"Buy on {opp.buy.display_name}", format_usd(opp.buy.price), opp.buy.pair_label, delta_color="off")
    cols[1].metric(f"Sell on {opp.sell.display_name}", format_usd(opp.sell.price), opp.sell.pair_label, delta_color="off")
    cols[2].metric("Spread", f"{opp.spread_percent:.2f}%")
    if opp.buy.is_dex or opp.sell.is_dex:
        st.caption("One leg is a DEX: on-chain gas and slippage are not included.")
else:
    st.info("No arbitrage opportunity above 0.1% among the listed exchanges.")

st.subheader(f"Tickers ({len(quotes)})")
df = tickers_frame(quotes, opp)
st.dataframe(
    df.style.apply(_highlight, axis=1).format({"price_usd": lambda v: format_usd(v) if pd.notna(v) else "-"}),
    use_container_width=True, hide_index=True,
)

st.subheader("Price history")
days = st.select_slider("Days", options=[1, 7, 14, 30, 90, 180, 365], value=settings.chart_default_days)
try:
    points = coingecko.fetch_price_history(coin_id, days)
    if points:
        st.line_chart(price_frame(points), y="price")
    else:
        st.caption("No price history available.")
except coingecko.MarketDataError as e:
    st.error(e.message)

st.subheader("Profit simulator")
with st.form("simulator"):
    c = st.columns(5)
    investment = c[0].text_input("Investment (USD)", "100")
    buy_price = c[1].text_input("Buy price", str(opp.buy.price) if opp else "")
    sell_price = c[2].text_input("Sell price", str(opp.sell.price) if opp else "")
    buy_fee = c[3].text_input("Buy fee %", "0.1")
    sell_fee = c[4].text_input("Sell fee %", "0.1")
    run = st.form_submit_button("Simulate")

if run:
    res = simulate(investment, buy_price, sell_price, buy_fee, sell_fee)
    if isinstance(res, SimulationError):
        st.error(res.message)
    else:
        r = st.columns(5)
        r[0].metric("Units", f"{res.units_acquired:,.6f}")
        r[1].metric("Total cost", format_usd(res.total_buy_cost))
        r[2].metric("Net proceeds", format_usd(res.net_sale_proceeds))
        r[3].metric("Profit", format_usd(res.gross_profit))
        r[4].metric("ROI", format_percent(res.roi_percent))

st.caption("Market data provided by CoinGecko.")
