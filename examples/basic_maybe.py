"""
Basic Maybe usage: construction, composition, and fallback extraction.

Run: python examples/basic_maybe.py
"""
from just_maybe import configure_logger, from_nullable, just, nothing


def parse_port(raw):
    return from_nullable(raw).filter(str.isdigit).map(int).filter(lambda p: 0 < p < 65536)


def main():
    # Show every step on stderr
    configure_logger(level="DEBUG")

    config = {"host": "localhost", "port": "8080", "debug_port": "oops"}

    port = parse_port(config.get("port")).trace("port")
    debug_port = parse_port(config.get("debug_port")).trace("debug_port")
    admin_port = parse_port(config.get("admin_port")).trace("admin_port")

    print("port =>", port.get_or_else(80))              # 8080
    print("debug_port =>", debug_port.get_or_else(0))   # 0
    print("admin_port =>", admin_port.fork(str, lambda: "unset"))  # unset

    # Apply a two-argument function to two optional values
    url = just(lambda h: lambda p: f"http://{h}:{p}").ap(from_nullable(config.get("host"))).ap(port)
    print("url =>", url)                                # Present(http://localhost:8080)

    # chain flattens functions that return a Maybe
    print("nested =>", just(just(3)), "joined =>", just(just(3)).join())
    print("missing =>", nothing().chain(lambda v: just(v + 1)))


if __name__ == "__main__":
    main()
