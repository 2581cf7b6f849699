"""기본 한국어 규칙 데이터

이 모듈은 데이터만 담는다. 규칙 테이블은 위에서부터 순서대로 검사되므로
긴 접미사를 짧은 접미사보다 먼저 둔다. 도메인별로 바꾸려면 YAML 규칙 파일을 사용한다.
"""

from __future__ import annotations

from .suffix_rules import RuleTable, SuffixRule

# ====================================================================
# 🧩 조사 (postposition)
# ====================================================================

# 한 글자 조사는 4글자 이상 단어에서만 뗀다 ("나이", "사회가" 보호)
SINGLE_PARTICLE_MIN_STEM = 3
MULTI_PARTICLE_MIN_STEM = 1

PARTICLE_SUFFIXES: tuple[str, ...] = (
    # 4글자
    "에게서는",
    # 3글자
    "에게서", "에게는", "에게도", "한테서", "한테는",
    "으로써", "으로서", "으로는", "으로도",
    "에서는", "에서도", "까지는", "부터는",
    # 2글자
    "에서", "에게", "에는", "에도", "한테", "으로",
    "로서", "로써", "로는", "까지", "부터", "보다",
    "마다", "조차", "마저", "과는", "와는", "과의", "와의",
    # 1글자
    "은", "는", "이", "가", "을", "를", "에", "의", "와", "과", "도", "만", "로",
)

# ====================================================================
# 🚫 용언/연결 어미 (predicate endings)
# ====================================================================

PREDICATE_SUFFIXES: tuple[str, ...] = (
    "가진다", "받는다", "하였다", "되었다", "하면서", "위하여", "의하여", "관련한",
    "한다", "된다", "있다", "없다", "했다", "하며", "하고", "하여", "해서",
    "하는", "되는", "되어", "위해", "통해", "처럼", "관한",
)

# 관형형 "…한", 서술형 "…다"는 두 글자 이상일 때만
ADNOMINAL_ENDINGS: tuple[SuffixRule, ...] = (
    SuffixRule("한", 1),
    SuffixRule("다", 1),
    # "발전하는" → "발전하" 처럼 조사 제거 뒤 남는 어간
    SuffixRule("하", 2),
    SuffixRule("되", 2),
)

# ====================================================================
# 💪 강한 명사 접미사
# ====================================================================

STRONG_NOUN_SUFFIXES: tuple[str, ...] = (
    "위원회",
    "제도", "정책", "기관", "시설", "사업", "문제", "현상", "관계", "체계",
    "구조", "방안", "대책", "기술", "산업", "시장", "경제", "사회", "문화",
    "교육", "환경", "정부", "연구",
    "성", "화", "력", "권", "론", "률", "율", "법", "학",
)

# ====================================================================
# 🛑 불용어 / 기능 명사
# ====================================================================

STOPWORDS: frozenset[str] = frozenset({
    "은", "는", "이", "가", "을", "를", "에", "에서", "에게", "으로", "으로써",
    "부터", "까지", "와", "과", "도", "만", "및", "등", "때문에", "위해", "통해",
    "또는", "또한", "또", "그리고", "하지만", "그러나", "그래서", "그런데", "그러면",
    "따라서", "그러므로", "즉", "혹은", "다만", "만약", "게다가", "더구나",
    "이것", "그것", "저것", "여기", "거기", "저기", "이런", "그런", "저런",
    "우리", "저희", "너희", "모든", "어떤", "각각", "매우", "아주", "정말",
    "가장", "이미", "아직", "바로", "다시", "함께", "모두", "먼저", "이제",
})

FUNCTION_NOUNS: frozenset[str] = frozenset({
    "것", "수", "때", "등", "점", "데", "바", "뿐", "줄", "듯", "중", "측",
    "내", "외", "간", "번", "개", "명", "년", "월", "일",
    "만큼", "정도", "경우", "때문", "이후", "이전", "부분", "가지", "자체", "관련",
})

MIN_KEYWORD_LENGTH = 2


def build_particle_table(suffixes: tuple[str, ...] = PARTICLE_SUFFIXES) -> RuleTable:
    """조사 테이블을 만든다. 한 글자 조사에는 짧은 단어 보호 규칙을 붙인다."""
    return RuleTable(
        SuffixRule(
            suffix,
            SINGLE_PARTICLE_MIN_STEM if len(suffix) == 1 else MULTI_PARTICLE_MIN_STEM,
        )
        for suffix in suffixes
    )


DEFAULT_PARTICLES = build_particle_table()
DEFAULT_PREDICATE_ENDINGS = RuleTable(
    [*(SuffixRule(suffix) for suffix in PREDICATE_SUFFIXES), *ADNOMINAL_ENDINGS]
)
DEFAULT_STRONG_NOUN_SUFFIXES = RuleTable.from_suffixes(STRONG_NOUN_SUFFIXES)
