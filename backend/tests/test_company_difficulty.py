from models.schemas.company_difficulty import (
    CompanyTier,
    CompetitionLevel,
    ExperienceLevel,
)
from models.schemas.jd_extracted import ExtractedJD
from services.company_difficulty import (
    ALIAS_MAP,
    COMPANY_DATABASE,
    DIFFERENTIATION_STRATEGIES,
    MAX_STRATEGIES,
    TIER_META,
    generate_differentiation_strategies,
    normalize_company_name,
    resolve_company_difficulty,
)


def test_normalize_strips_suffixes():
    assert normalize_company_name("Google LLC") == "google"
    assert normalize_company_name("Stripe, Inc.") == "stripe"
    assert normalize_company_name("  Databricks  ") == "databricks"
    assert normalize_company_name("Palantir Technologies") == "palantir"


def test_normalize_resolves_aliases():
    assert normalize_company_name("Facebook") == "meta"
    assert normalize_company_name("ByteDance") == "tiktok"
    assert normalize_company_name("JPMorgan") == "jp morgan"


def test_aliases_point_at_known_companies():
    assert set(ALIAS_MAP.values()) <= set(COMPANY_DATABASE)


def test_known_company():
    ctx = resolve_company_difficulty("Google")
    assert ctx.tier == CompanyTier.FAANG_PLUS
    assert ctx.adjustment_factor == 1.45
    assert ctx.difficulty_score == 145
    assert ctx.acceptance_rate_estimate == "1-2%"
    assert ctx.competition_level == CompetitionLevel.EXTREME
    assert ctx.company_name == "Google"
    assert ctx.is_intern is False
    assert len(ctx.differentiation_strategies) == 4


def test_known_company_intern_capped():
    # 1.45 * 1.25 = 1.81 -> capped at 1.5
    ctx = resolve_company_difficulty("Google", ExperienceLevel.INTERN)
    assert ctx.is_intern is True
    assert ctx.adjustment_factor == 1.5
    assert ctx.difficulty_score == 150


def test_known_company_intern_uncapped():
    # 1.2 * 1.05 = 1.26
    ctx = resolve_company_difficulty("Vercel", ExperienceLevel.INTERN)
    assert ctx.tier == CompanyTier.UNICORN
    assert ctx.adjustment_factor == 1.26
    assert ctx.difficulty_score == 126


def test_inferred_from_jd_wording():
    jd = ExtractedJD(must_have=["Python"], keywords=["Series B startup"])
    ctx = resolve_company_difficulty("Acme Widgets", extracted_jd=jd)
    assert ctx.tier == CompanyTier.GROWTH
    assert ctx.adjustment_factor == 1.1
    assert ctx.difficulty_score == 110
    assert ctx.company_name == "Acme Widgets"


def test_inferred_intern_multiplier():
    jd = ExtractedJD(keywords=["hedge fund"])
    ctx = resolve_company_difficulty(None, ExperienceLevel.INTERN, jd)
    assert ctx.tier == CompanyTier.TOP_FINANCE
    assert ctx.adjustment_factor == 1.43
    assert ctx.company_name == "Unknown"


def test_inference_order_first_match_wins():
    jd = ExtractedJD(keywords=["Fortune 500", "private equity backed"])
    ctx = resolve_company_difficulty("Acme", extracted_jd=jd)
    assert ctx.tier == CompanyTier.BIG_TECH
    assert ctx.adjustment_factor == 1.15


def test_standard_fallback():
    ctx = resolve_company_difficulty("Acme Widgets")
    assert ctx.tier == CompanyTier.STANDARD
    assert ctx.adjustment_factor == 1.0
    assert ctx.difficulty_score == 100
    assert ctx.differentiation_strategies == []
    assert ctx.acceptance_rate_estimate == "10-20%"


def test_standard_fallback_without_name():
    ctx = resolve_company_difficulty(None)
    assert ctx.tier == CompanyTier.STANDARD
    assert ctx.company_name == "Unknown"


def test_strategies_capped():
    jd = ExtractedJD(must_have=["Machine learning", "Distributed systems"])
    strategies = generate_differentiation_strategies(
        CompanyTier.FAANG_PLUS, ExperienceLevel.INTERN, jd
    )
    assert len(strategies) == MAX_STRATEGIES
    assert any("intern candidate" in s for s in strategies)
    assert any("ML model lifecycle" in s for s in strategies)


def test_strategies_from_jd_focus():
    jd = ExtractedJD(keywords=["microservices"])
    strategies = generate_differentiation_strategies(CompanyTier.GROWTH, ExperienceLevel.MID, jd)
    assert len(strategies) == 5
    assert "partition tolerance" in strategies[-1]


def test_standard_tier_has_no_template_strategies():
    assert generate_differentiation_strategies(CompanyTier.STANDARD, ExperienceLevel.ENTRY) == []


def test_known_company_has_own_interview_bar():
    ctx = resolve_company_difficulty("Jane Street")
    assert "OCaml" in ctx.interview_bar_description
    assert "market-making" in ctx.interview_bar_description


def test_inferred_tier_uses_tier_interview_bar():
    jd = ExtractedJD(keywords=["hedge fund"])
    ctx = resolve_company_difficulty("Acme Capital", extracted_jd=jd)
    assert ctx.interview_bar_description == TIER_META[CompanyTier.TOP_FINANCE].bar_description


def test_point72_known():
    ctx = resolve_company_difficulty("Point72")
    assert ctx.tier == CompanyTier.TOP_FINANCE
    assert ctx.adjustment_factor == 1.35
    assert ctx.acceptance_rate_estimate == "2-4%"
    assert "Hedge fund" in ctx.interview_bar_description


def test_every_known_company_has_interview_bar():
    assert len(COMPANY_DATABASE) == 58
    for entry in COMPANY_DATABASE.values():
        assert entry.interview_bar_description


def test_strategy_wording():
    strategies = generate_differentiation_strategies(CompanyTier.UNICORN, ExperienceLevel.ENTRY)
    assert strategies[0] == "Show scrappiness and ability to ship fast with quality; unicorns value speed"
    assert DIFFERENTIATION_STRATEGIES[CompanyTier.UNICORN][5].startswith("Demonstrate passion for")
    assert not any("\u2014" in s for rows in DIFFERENTIATION_STRATEGIES.values() for s in rows)
