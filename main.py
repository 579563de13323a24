#!/usr/bin/env python3
"""
minihtml 데모 - URL 을 받아 파싱한 트리를 출력
사용법: python main.py <URL> [--text] [--json]
예시: python main.py https://example.com
"""
import logging
import sys

from minihtml import parse_from_url, to_json, traverse


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    args = [arg for arg in sys.argv[1:] if not arg.startswith("--")]
    flags = {arg for arg in sys.argv[1:] if arg.startswith("--")}
    url = args[0] if args else "about:blank"

    root = parse_from_url(url, include_text="--text" in flags)
    if "--json" in flags:
        print(to_json(root))
    else:
        traverse(root)


if __name__ == "__main__":
    main()
