"""インポーターモジュール共通の定数."""

# 比例代表の総定数・小選挙区数（2017年改定以降）
PR_TOTAL_SEATS = 176
FPTP_TOTAL_SEATS = 289

# 比例代表11ブロック（識別子 → 表示名）
PROPORTIONAL_BLOCKS: dict[str, str] = {
    "hokkaido": "北海道",
    "tohoku": "東北",
    "kita_kanto": "北関東",
    "minami_kanto": "南関東",
    "tokyo": "東京",
    "hokuriku_shinetsu": "北陸信越",
    "tokai": "東海",
    "kinki": "近畿",
    "chugoku": "中国",
    "shikoku": "四国",
    "kyushu": "九州",
}

# 表記ゆれ → ブロック識別子
PROPORTIONAL_BLOCK_ALIASES: dict[str, str] = {
    "東京都": "tokyo",
}

# ブロック別定数（改定年 → 識別子 → 定数）
BLOCK_SEATS_BY_VERSION: dict[str, dict[str, int]] = {
    # 第48回（2017年）〜第49回
    "2017": {
        "hokkaido": 8,
        "tohoku": 13,
        "kita_kanto": 19,
        "minami_kanto": 22,
        "tokyo": 17,
        "hokuriku_shinetsu": 11,
        "tokai": 21,
        "kinki": 28,
        "chugoku": 11,
        "shikoku": 6,
        "kyushu": 20,
    },
    # 第50回（2024年）〜 10増10減後
    "2022": {
        "hokkaido": 8,
        "tohoku": 12,
        "kita_kanto": 19,
        "minami_kanto": 23,
        "tokyo": 19,
        "hokuriku_shinetsu": 10,
        "tokai": 21,
        "kinki": 28,
        "chugoku": 10,
        "shikoku": 6,
        "kyushu": 20,
    },
}

DEFAULT_BLOCK_SEATS_VERSION = "2017"

# 都道府県名リスト（コード順、1:北海道〜47:沖縄県）
PREFECTURE_NAMES: list[str] = [
    "北海道",
    "青森県",
    "岩手県",
    "宮城県",
    "秋田県",
    "山形県",
    "福島県",
    "茨城県",
    "栃木県",
    "群馬県",
    "埼玉県",
    "千葉県",
    "東京都",
    "神奈川県",
    "新潟県",
    "富山県",
    "石川県",
    "福井県",
    "山梨県",
    "長野県",
    "岐阜県",
    "静岡県",
    "愛知県",
    "三重県",
    "滋賀県",
    "京都府",
    "大阪府",
    "兵庫県",
    "奈良県",
    "和歌山県",
    "鳥取県",
    "島根県",
    "岡山県",
    "広島県",
    "山口県",
    "徳島県",
    "香川県",
    "愛媛県",
    "高知県",
    "福岡県",
    "佐賀県",
    "長崎県",
    "熊本県",
    "大分県",
    "宮崎県",
    "鹿児島県",
    "沖縄県",
]
