"""
計時與日誌範例

展示如何使用 verbose=True / on_timing / on_event
監控初始化與解析。
"""

from cpcaparse import AddressParser, ParserConfig, enable_timing_logging


def demo_timing_with_verbose():
    """使用 verbose=True 啟用計時"""
    print("=" * 60)
    print("範例 1: 使用 verbose=True 啟用計時")
    print("=" * 60)

    parser = AddressParser(verbose=True)
    print(f"\n結果: {parser.parse('湖北省黄石市下陆区团城山')}")
    print()


def demo_timing_with_callback():
    """使用 on_timing 回呼收集計時資訊"""
    print("=" * 60)
    print("範例 2: 使用 on_timing 回呼收集計時資訊")
    print("=" * 60)

    timing_data = []

    def collect_timing(operation: str, elapsed: float):
        timing_data.append({"operation": operation, "elapsed": elapsed})

    AddressParser(on_timing=collect_timing)

    print("\n收集到的計時資訊:")
    for item in timing_data:
        print(f"  {item['operation']}: {item['elapsed']:.4f}s")
    print()


def demo_events():
    """使用 on_event 取得每次解析的統計"""
    print("=" * 60)
    print("範例 3: 使用 on_event 取得解析事件")
    print("=" * 60)

    parser = AddressParser(config=ParserConfig(on_event=print))
    for text in ["保安镇大王村", "火星基地"]:
        parser.parse(text)
    print()


def demo_manual_logging():
    """手動控制日誌等級"""
    print("=" * 60)
    print("範例 4: 只輸出計時日誌")
    print("=" * 60)

    # 也可以直接設定標準 logging:
    # logging.getLogger("cpcaparse").setLevel(logging.DEBUG)
    enable_timing_logging()

    AddressParser().parse("新疆伊犁霍尔果斯市")
    print()


if __name__ == "__main__":
    demo_timing_with_verbose()
    demo_timing_with_callback()
    demo_events()
    demo_manual_logging()
