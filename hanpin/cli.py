"""
HanPin 命令行工具
"""

import argparse
import sys

from hanpin.engine.config import PinyinFormat


def _add_format_argument(parser, default: PinyinFormat):
    parser.add_argument(
        "-f", "--format",
        default=default.value,
        choices=[f.value for f in PinyinFormat],
        help=f"拼音格式 (默认: {default.value})",
    )


def main(argv=None):
    """命令行入口"""
    from hanpin.engine import ConverterConfig, setup_logging

    config = ConverterConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="hanpin",
        description="HanPin - 汉字转拼音",
    )
    parser.add_argument("-d", "--dict-dir", default=config.dict_dir, help="词典目录 (默认: 包内自带)")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # convert 命令
    convert_parser = subparsers.add_parser("convert", help="字符串转拼音")
    convert_parser.add_argument("text", help="输入文本")
    convert_parser.add_argument("-s", "--separator", default=config.separator, help="拼音分隔符")
    _add_format_argument(convert_parser, config.pinyin_format)

    # char 命令
    char_parser = subparsers.add_parser("char", help="单字所有读音")
    char_parser.add_argument("char", help="单个汉字")
    _add_format_argument(char_parser, config.pinyin_format)

    # segment 命令
    segment_parser = subparsers.add_parser("segment", help="显示多音词切分结果")
    segment_parser.add_argument("text", help="输入文本")

    # server 命令
    server_parser = subparsers.add_parser("server", help="启动 API 服务")
    server_parser.add_argument("--host", default="0.0.0.0", help="绑定地址 (默认: 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=3000, help="端口 (默认: 3000)")

    # version 命令
    subparsers.add_parser("version", help="显示版本")

    args = parser.parse_args(argv)

    if args.command in ("convert", "char", "segment"):
        from hanpin.engine import create_converter

        setup_logging('hanpin.engine', level=config.log_level)
        config.dict_dir = args.dict_dir
        converter = create_converter(config)

        if args.command == "convert":
            fmt = PinyinFormat.parse(args.format)
            print(converter.convert_statement(args.text, args.separator, fmt))

        elif args.command == "char":
            if len(args.char) != 1:
                parser.error("char 只接受单个字符")
            fmt = PinyinFormat.parse(args.format)
            pinyins = converter.convert_character(args.char, fmt)
            if not pinyins:
                print(f"{args.char}: 无拼音数据")
                sys.exit(1)
            for i, pinyin in enumerate(pinyins, 1):
                print(f"{i}. {pinyin}")
            if converter.is_multi_pinyin(args.char):
                print("(多音字)")

        else:
            for segment in converter.trie.segment(args.text):
                mark = "*" if segment.matched else " "
                print(f"{mark} {segment.text}")

    elif args.command == "server":
        from hanpin.api.server import main as server_main
        import os
        os.environ["HOST"] = args.host
        os.environ["PORT"] = str(args.port)
        if args.dict_dir:
            os.environ["HANPIN_DICT_DIR"] = args.dict_dir
        server_main()

    elif args.command == "version":
        from hanpin import __version__
        print(f"HanPin v{__version__}")

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
