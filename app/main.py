import sys
import os
import logging
import time
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from fpcore.domain import Expense, ShoppingCart, ToyCar
from fpcore.ftypes import Either, Maybe
from fpcore.kleisli import Kleisli, pipe
from fpcore.lazy import render_tree, tree_stats
from fpcore.monads import do10x, get_pairs, list_monad, maybe_monad, tree_monad
from fpcore.recursion import unfold_tree, unfold_tree_recursive
from fpcore.service import (
    BandwidthService,
    EitherHttpService,
    OptionHttpService,
    OrderTracker,
    get_response,
)
from fpcore.transformers import OptionT
from fpcore.tree import Branch, Leaf
from fpcore.typeclasses import (
    dict_monoid,
    expense_semigroup,
    int_monoid,
    int_semigroup,
    maybe_monoid,
    shopping_cart_monoid,
    toy_car_eq,
)
from fpcore.writer import count_and_log, sum_with_logs

logging.basicConfig(
    level=os.environ.get("FPCORE_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# ============ Деревья для демонстрации ============
def chain_step(v: int):
    """Цепочка глубины v: слева готовый лист, справа продолжение"""
    if v <= 0:
        return Leaf(Either.right(0))
    return Branch(Leaf(Either.right(v)), Leaf(Either.left(v - 1)))


def balanced_step(v: int):
    """Сбалансированное дерево глубины v"""
    if v <= 0:
        return Leaf(Either.right(0))
    return Branch(Leaf(Either.left(v - 1)), Leaf(Either.left(v - 1)))


STEPS = {"Цепочка": chain_step, "Сбалансированное": balanced_step}


@st.cache_data
def get_phonebooks():
    return (
        {"Alice": 234, "Bob": 647},
        {"Charlie": 389, "Daniel": 889},
        {"Tina": 123},
    )


# ============ Инициализация ============
st.set_page_config(
    page_title="FP Abstractions Lab",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.title("🌳 Функциональные абстракции")
st.caption("💻 Python 3.11+ | Eq, Semigroup, Monoid, Monad, Writer, Kleisli")

with st.sidebar:
    st.header("📂 Навигация")
    page = st.radio(
        "Выберите раздел:",
        [
            "🌳 Tree tailRecM",
            "➕ Semigroup/Monoid",
            "🔗 Monads",
            "🧅 Transformers",
            "📝 Writer",
            "🧩 Kleisli",
        ],
        label_visibility="collapsed",
    )


# ============ PAGE: TREE ============
if page == "🌳 Tree tailRecM":
    st.header("🌳 Стекобезопасное разворачивание дерева")

    col1, col2 = st.columns(2)
    with col1:
        shape = st.selectbox("Форма дерева", list(STEPS), key="tree_shape")
    with col2:
        limit = 100_000 if shape == "Цепочка" else 16
        seed = st.number_input("Глубина", min_value=0, max_value=limit, value=5)

    step = STEPS[shape]

    if st.button("▶️ Развернуть", type="primary", key="tree_run"):
        start = time.perf_counter()
        tree = unfold_tree(int(seed), step)
        elapsed = (time.perf_counter() - start) * 1000

        stats = tree_stats(tree)
        st.success(f"✅ Готово за {elapsed:.2f} ms")
        cols = st.columns(4)
        cols[0].metric("Узлы", stats["nodes"])
        cols[1].metric("Листья", stats["leaves"])
        cols[2].metric("Ветви", stats["branches"])
        cols[3].metric("Глубина", stats["depth"])

        if stats["nodes"] <= 200:
            st.code("\n".join(render_tree(tree)))

        st.divider()
        st.subheader("Наивная рекурсия")
        try:
            naive = unfold_tree_recursive(int(seed), step)
            st.write("Результаты совпадают:", naive == tree)
        except RecursionError:
            st.error("❌ RecursionError: стек вызовов исчерпан")

    st.divider()
    st.subheader("flat_map")
    example = Branch(Leaf(10), Leaf(20))
    changed = tree_monad.flat_map(example, lambda v: Branch(Leaf(v - 1), Leaf(v + 1)))
    st.code(f"{example}\n→ {changed}")


# ============ PAGE: SEMIGROUP / MONOID ============
elif page == "➕ Semigroup/Monoid":
    st.header("➕ Eq, Semigroup, Monoid")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("##### Eq")
        st.write(
            "Ferrari(29.99) === Lamborghini(29.99):",
            toy_car_eq.eqv(ToyCar("Ferrari", 29.99), ToyCar("Lamborghini", 29.99)),
        )
        st.markdown("##### Semigroup")
        st.write("2 |+| 3 =", int_semigroup.combine(2, 3))
        st.write(
            "Expense(4, 80) |+| Expense(46, 56) =",
            expense_semigroup.combine(Expense(4, 80), Expense(46, 56)),
        )

    with col2:
        st.markdown("##### Monoid")
        option_monoid = maybe_monoid(int_monoid)
        st.write("Some(2) |+| Nothing =", option_monoid.combine(Maybe.some(2), Maybe.nothing()))

        phonebooks = get_phonebooks()
        merged = dict_monoid(int_monoid).empty
        for book in phonebooks:
            merged = dict_monoid(int_monoid).combine(merged, book)
        st.json(merged)

        cart = shopping_cart_monoid.combine(
            ShoppingCart(("iphone", "shoes"), 800), ShoppingCart(("TV",), 200)
        )
        st.write("Корзина:", cart)


# ============ PAGE: MONADS ============
elif page == "🔗 Monads":
    st.header("🔗 Монады")

    st.write("get_pairs(List):", get_pairs(list_monad, [1, 2, 3], ["a", "b", "c"]))
    st.write("get_pairs(Maybe):", get_pairs(maybe_monad, Maybe.some(4), Maybe.some("c")))
    st.write("do10x(Maybe):", do10x(maybe_monad, Maybe.some(42)))

    st.divider()
    st.subheader("📦 Отслеживание заказа")
    order_id = st.number_input("ID заказа", min_value=1, value=456)
    st.write(OrderTracker().order_location(int(order_id)))

    st.subheader("🌐 HTTP-сервис")
    payload = st.text_input("Payload", "Hello, HTTP service")
    st.write("Option:", get_response(OptionHttpService(), payload))
    st.write("Either:", get_response(EitherHttpService(), payload))


# ============ PAGE: TRANSFORMERS ============
elif page == "🧅 Transformers":
    st.header("🧅 OptionT / EitherT")

    numbers = OptionT(list_monad, [Maybe.some(1), Maybe.some(2)])
    chars = OptionT(list_monad, [Maybe.some("a"), Maybe.some("b"), Maybe.nothing()])
    pairs = numbers.flat_map(lambda n: chars.map(lambda c: (n, c)))
    st.write("OptionT[List]:", pairs.value)

    st.divider()
    service = BandwidthService()
    servers = sorted(service.bandwidths) + ["server4.xxx.com"]
    col1, col2 = st.columns(2)
    with col1:
        s1 = st.selectbox("Сервер 1", servers, index=0)
    with col2:
        s2 = st.selectbox("Сервер 2", servers, index=2)

    report = service.traffic_spike_report(s1, s2).value
    if report.is_right:
        st.success(report.value)
    else:
        st.error(report.value)


# ============ PAGE: WRITER ============
elif page == "📝 Writer":
    st.header("📝 Writer")

    n = st.slider("n", 0, 20, 10)
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("count_and_log")
        st.code("\n".join(count_and_log(n).written))
    with col2:
        st.subheader("sum_with_logs")
        writer = sum_with_logs(n)
        st.code("\n".join(writer.written))
        st.metric("Сумма", writer.value)


# ============ PAGE: KLEISLI ============
elif page == "🧩 Kleisli":
    st.header("🧩 Kleisli")

    func1 = Kleisli(
        maybe_monad, lambda x: Maybe.some(f"{x} is even") if x % 2 == 0 else Maybe.nothing()
    )
    func2 = Kleisli(maybe_monad, lambda x: Maybe.some(x * 3))
    plain = pipe(lambda x: x * 3, lambda x: f"{x} is even" if x % 2 == 0 else "fail")

    x = st.number_input("x", value=2)
    st.write("plain pipe:", plain(int(x)))
    st.write("func2 andThen func1:", func2.and_then(func1)(int(x)))
    st.write("func2.map(*2):", func2.map(lambda v: v * 2)(int(x)))
