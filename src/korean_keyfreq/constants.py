"""중앙화된 산출물 경로 상수 관리

CLI 기본값으로 쓰이는 입력/출력 경로를 한곳에서 관리한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 📁 루트 디렉토리
# ====================================================================

ARTIFACTS_ROOT = Path("artifacts")

# ====================================================================
# 📊 코퍼스 경로
# ====================================================================

CORPORA_DIR = ARTIFACTS_ROOT / "corpora"

# ====================================================================
# 📈 분석 산출물 경로
# ====================================================================

REPORTS_DIR = ARTIFACTS_ROOT / "reports"
KEYWORD_FREQUENCY_FILE = REPORTS_DIR / "keyword_frequency.parquet"

# ====================================================================
# 📏 규칙 경로
# ====================================================================

RULES_DIR = ARTIFACTS_ROOT / "rules"
RULES_FILE = RULES_DIR / "korean_rules.yaml"

# ====================================================================
# 📝 로그 경로
# ====================================================================

LOGS_DIR = ARTIFACTS_ROOT / "logs"
