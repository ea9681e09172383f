import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    root logger 에 stderr 핸들러 하나만 등록.
    create_app() 을 여러 번 호출해도 핸들러가 중복되지 않는다.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for h in list(root.handlers):
        if getattr(h, "_pawtracker", False):
            root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    handler._pawtracker = True
    root.addHandler(handler)

    # SQL 로그는 WARNING 이상만
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
