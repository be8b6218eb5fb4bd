"""
省市區解析範例

展示全稱、簡稱、歧義地址與限定條件的用法。
"""

from cpcaparse import AddressParser, FilterCondition


def demo_basic(parser: AddressParser):
    print("=" * 60)
    print("範例 1: 全稱與簡稱")
    print("=" * 60)

    for text in ["湖北省黄石市下陆区团城山", "新疆伊犁霍尔果斯市", "北京朝阳区建外街道"]:
        print(f"{text} -> {parser.parse(text)}")
    print()


def demo_ambiguous(parser: AddressParser):
    print("=" * 60)
    print("範例 2: 歧義地址與限定條件")
    print("=" * 60)

    results = parser.parse("保安镇大王村")
    print(f"保安镇大王村 -> {len(results)} 個結果")
    for result in results:
        print(f"  {result.to_dict()}")

    narrowed = parser.parse("保安镇大王村", FilterCondition(city="平顶山市"))
    print(f"限定 city=平顶山市 -> {narrowed}")
    print()


def demo_keywords(parser: AddressParser):
    print("=" * 60)
    print("範例 3: 查看自動機命中")
    print("=" * 60)

    for match in parser.find_keywords("新疆伊犁霍尔果斯市"):
        print(f"  {match.keyword} [{match.start}, {match.end})")
    print()


if __name__ == "__main__":
    parser = AddressParser()

    demo_basic(parser)
    demo_ambiguous(parser)
    demo_keywords(parser)
