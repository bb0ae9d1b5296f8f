from delve import config
from delve.engine import Engine
from delve.logging_config import configure_logging


def main() -> None:
    configure_logging()
    cfg = config.load_config()
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
