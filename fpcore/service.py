import logging
from typing import Dict, Optional

from .domain import Connection, OrderStatus
from .ftypes import Either, Maybe
from .monads import Monad, either_monad, identity_monad, maybe_monad
from .transformers import EitherT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, str] = {"host": "localhost", "port": "4040"}
MAX_PAYLOAD_LENGTH = 20
MAX_TRACKED_ORDER_ID = 1000

DEFAULT_BANDWIDTHS: Dict[str, int] = {
    "server1.xxx.com": 50,
    "server2.xxx.com": 300,
    "server3.xxx.com": 170,
}
SURGE_THRESHOLD = 250


class OrderTracker:
    """Фасад отслеживания заказа: два шага, каждый может вернуть Left"""

    def get_order_status(self, order_id: int) -> Either[str, OrderStatus]:
        return Either.right(OrderStatus(order_id, "Ready to ship"))

    def track_location(self, status: OrderStatus) -> Either[str, str]:
        if status.order_id > MAX_TRACKED_ORDER_ID:
            return Either.left("Not available yet, refreshing data...")
        return Either.right("Amsterdam, Netherlands")

    def order_location(self, order_id: int) -> Either[str, str]:
        """Цепочка bind: статус -> местоположение"""
        return self.get_order_status(order_id).bind(self.track_location)


# ============ HTTP-сервис, обобщённый по монаде ============


class HttpService:
    """
    Сервисный слой: get_connection и issue_request возвращают F[...].
    Конкретный F задаётся атрибутом monad у наследника.
    """

    monad: Monad

    def get_connection(self, cfg: Dict[str, str]):
        raise NotImplementedError

    def issue_request(self, connection: Connection, payload: str):
        raise NotImplementedError


class OptionHttpService(HttpService):
    monad = maybe_monad

    def get_connection(self, cfg: Dict[str, str]) -> Maybe[Connection]:
        return Maybe.of(cfg.get("host")).bind(
            lambda host: Maybe.of(cfg.get("port")).map(
                lambda port: Connection(host, port)
            )
        )

    def issue_request(self, connection: Connection, payload: str) -> Maybe[str]:
        if len(payload) >= MAX_PAYLOAD_LENGTH:
            return Maybe.nothing()
        return Maybe.some(f"({payload}) has been accepted")


class EitherHttpService(HttpService):
    monad = either_monad

    def get_connection(self, cfg: Dict[str, str]) -> Either[str, Connection]:
        missing = [key for key in ("host", "port") if key not in cfg]
        if missing:
            return Either.left(f"No such host or port: missing {', '.join(missing)}")
        return Either.right(Connection(cfg["host"], cfg["port"]))

    def issue_request(self, connection: Connection, payload: str) -> Either[str, str]:
        if len(payload) >= MAX_PAYLOAD_LENGTH:
            return Either.left("FAIL: payload is too long")
        return Either.right(f"({payload}) has been accepted")


def get_response(
    service: HttpService, payload: str, cfg: Optional[Dict[str, str]] = None
):
    """Высокоуровневый API: одна реализация для любого HttpService"""
    monad = service.monad
    return monad.flat_map(
        service.get_connection(DEFAULT_CONFIG if cfg is None else cfg),
        lambda connection: service.issue_request(connection, payload),
    )


# ============ Пропускная способность серверов (EitherT) ============


class BandwidthService:
    """
    Выдерживают ли два сервера всплеск трафика.
    Ответ приходит как EitherT поверх Identity: Left с причиной или Right со значением.
    """

    def __init__(self, bandwidths: Optional[Dict[str, int]] = None):
        self.bandwidths = dict(DEFAULT_BANDWIDTHS if bandwidths is None else bandwidths)
        self.monad = identity_monad

    def get_bandwidth(self, server: str) -> EitherT:
        if server not in self.bandwidths:
            return EitherT.left(self.monad, f"server {server} unreachable")
        return EitherT.right(self.monad, self.bandwidths[server])

    def can_withstand_surge(self, s1: str, s2: str) -> EitherT:
        return self.get_bandwidth(s1).flat_map(
            lambda b1: self.get_bandwidth(s2).map(lambda b2: b1 + b2 > SURGE_THRESHOLD)
        )

    def traffic_spike_report(self, s1: str, s2: str) -> EitherT:
        def to_report(result: Either) -> Either:
            if result.is_left:
                return Either.left(
                    f"Servers {s1} and {s2} cannot cope with the traffic spike: "
                    f"{result.value}"
                )
            if not result.value:
                return Either.left(
                    f"Servers {s1} and {s2} don't have enough total bandwidth "
                    "to cope with the incoming spike"
                )
            return Either.right(f"Servers {s1} and {s2} can cope with the incoming spike")

        report = self.can_withstand_surge(s1, s2).transform(to_report)
        logger.info("traffic spike report for %s, %s: %r", s1, s2, report.value)
        return report
