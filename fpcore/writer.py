# fpcore/writer.py
# Writer: значение + накопленный журнал.
# Журналы объединяются моноидом, поэтому вычисления остаются чистыми.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Tuple

from .typeclasses import Monoid, tuple_monoid


@dataclass(frozen=True)
class Writer:
    """
    Writer(written, value).
    По умолчанию журнал: кортеж строк (tuple_monoid).
    """

    written: Any
    value: Any
    monoid: Monoid = field(default=tuple_monoid, repr=False, compare=False)

    @staticmethod
    def pure(value, monoid: Monoid = tuple_monoid) -> "Writer":
        return Writer(monoid.empty, value, monoid)

    @staticmethod
    def tell(written, monoid: Monoid = tuple_monoid) -> "Writer":
        return Writer(written, None, monoid)

    def run(self) -> Tuple[Any, Any]:
        return self.written, self.value

    # меняется только значение
    def map(self, fn: Callable) -> "Writer":
        return Writer(self.written, fn(self.value), self.monoid)

    # меняется только журнал
    def map_written(self, fn: Callable) -> "Writer":
        return Writer(fn(self.written), self.value, self.monoid)

    def bimap(self, written_fn: Callable, value_fn: Callable) -> "Writer":
        return Writer(written_fn(self.written), value_fn(self.value), self.monoid)

    def map_both(self, fn: Callable[[Any, Any], Tuple[Any, Any]]) -> "Writer":
        """fn(written, value) -> (written', value'): журнал и значение видят друг друга"""
        written, value = fn(self.written, self.value)
        return Writer(written, value, self.monoid)

    def flat_map(self, fn: Callable[[Any], "Writer"]) -> "Writer":
        nxt = fn(self.value)
        return Writer(self.monoid.combine(self.written, nxt.written), nxt.value, self.monoid)

    def reset(self) -> "Writer":
        return Writer(self.monoid.empty, self.value, self.monoid)


# ============ Примеры: печать -> журнал ============


def count_and_log(n: int) -> Writer:
    """
    Чистая версия countAndSay: журнал вместо print
    count_and_log(3).written == ("Starting!", "1", "2", "3")
    Журнал накапливается в цикле, глубина стека не зависит от n.
    """
    writer = Writer(("Starting!",), 0)
    for i in range(1, n + 1):
        writer = writer.flat_map(lambda _, i=i: Writer((str(i),), i))
    return writer


def sum_with_logs(n: int) -> Writer:
    """
    Сумма 1..n с журналом, как у naive_sum:
      "Now at n", ..., "Now at 1", "Computed sum (0) = 0", ...
    """
    if n <= 0:
        return Writer((), 0)
    return (
        Writer((f"Now at {n}",), n)
        .flat_map(lambda _: sum_with_logs(n - 1))
        .flat_map(
            lambda lower: Writer((f"Computed sum ({n - 1}) = {lower}",), n).map(
                lambda _: lower + n
            )
        )
    )
