"""
Structlog 日志配置模块

库本身不在导入时配置日志：宿主应用自行调用 ``configure_logging()``。
处理链会脱敏 ``secret_key`` 等凭据字段，凭据不会出现在任何日志事件中。
"""
import logging
import json
import structlog
from structlog.processors import TimeStamper, add_log_level, JSONRenderer
from structlog.dev import ConsoleRenderer
from structlog.contextvars import merge_contextvars
from structlog.stdlib import ProcessorFormatter
from typing import Any, List, Optional

from esewa_gateway.core.config import settings


PACKAGE_LOGGER = "esewa_gateway"

SENSITIVE_KEYS = frozenset({"secret_key", "signature", "authorization"})
REDACTED = "***"


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: REDACTED if str(k).lower() in SENSITIVE_KEYS else _redact(v)
            for k, v in value.items()
        }
    return value


def redact_sensitive(logger: Any, method_name: str, event_dict: dict) -> dict:
    """structlog processor：替换凭据字段（含嵌套 dict，如请求参数）。"""
    return _redact(event_dict)


def get_renderer(debug: bool) -> Any:
    """Console in DEBUG, JSON otherwise."""
    if debug:
        return ConsoleRenderer(colors=True)

    def _dumps(obj, default=None, **kwargs):
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)
    return JSONRenderer(serializer=_dumps)


def configure_logging(debug: Optional[bool] = None, *, handler: Optional[logging.Handler] = None) -> logging.Handler:
    """配置 structlog，并把本包的 stdlib 日志桥接到同一处理链。

    只在 ``esewa_gateway`` logger 上挂载处理器，不改动 root logger。
    重复调用会替换之前安装的处理器。返回安装的处理器。
    """
    debug = settings.DEBUG if debug is None else debug

    shared_pre_chain: List[Any] = [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        redact_sensitive,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *shared_pre_chain,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = ProcessorFormatter(
        foreign_pre_chain=shared_pre_chain,
        processors=[
            ProcessorFormatter.remove_processors_meta,
            get_renderer(debug),
        ],
    )

    handler = handler or logging.StreamHandler()
    handler.setFormatter(formatter)
    handler._esewa_gateway = True  # type: ignore[attr-defined]

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if getattr(existing, "_esewa_gateway", False):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return handler


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """获取 structlog logger 实例。"""
    return structlog.get_logger(name)
