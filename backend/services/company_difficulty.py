"""Company difficulty resolution: employer name -> difficulty context.

Lookup order:
1. Known-company table (after suffix stripping and alias resolution)
2. Tier inference from JD wording ("Series B", "hedge fund", ...)
3. STANDARD baseline (factor 1.0)
"""

import logging
import re
from typing import NamedTuple

from models.schemas.company_difficulty import (
    CompanyDifficultyContext,
    CompanyTier,
    CompetitionLevel,
    ExperienceLevel,
)
from models.schemas.jd_extracted import ExtractedJD

logger = logging.getLogger(__name__)

COMPANY_DIFFICULTY_VERSION = "v0.1"
MAX_ADJUSTMENT_FACTOR = 1.5
INFERRED_INTERN_MULTIPLIER = 1.1
MAX_STRATEGIES = 6


class CompanyEntry(NamedTuple):
    tier: CompanyTier
    difficulty_multiplier: float
    intern_multiplier: float
    acceptance_rate_estimate: str
    competition_level: CompetitionLevel
    interview_bar_description: str
    aliases: tuple[str, ...] = ()


_F, _BT, _FIN, _U, _G = (
    CompanyTier.FAANG_PLUS, CompanyTier.BIG_TECH, CompanyTier.TOP_FINANCE,
    CompanyTier.UNICORN, CompanyTier.GROWTH,
)
_X, _VH, _HI, _MOD = (
    CompetitionLevel.EXTREME, CompetitionLevel.VERY_HIGH,
    CompetitionLevel.HIGH, CompetitionLevel.MODERATE,
)

COMPANY_DATABASE: dict[str, CompanyEntry] = {
    # FAANG_PLUS
    "google": CompanyEntry(
        _F, 1.45, 1.25, "1-2%", _X,
        "Expects strong algorithmic thinking, system design depth, and Googleyness (leadership, "
        "collaboration). Multiple rounds with high reject rates at each stage.",
        ("alphabet",),
    ),
    "meta": CompanyEntry(
        _F, 1.4, 1.25, "1-3%", _X,
        "Emphasizes move-fast culture, coding speed, and system design. Behavioral rounds focus "
        "on impact at scale.",
        ("facebook",),
    ),
    "apple": CompanyEntry(
        _F, 1.4, 1.2, "2-4%", _X,
        "Highly secretive process. Deep domain expertise required. Emphasis on craft, attention "
        "to detail, and cross-functional collaboration.",
    ),
    "amazon": CompanyEntry(
        _F, 1.4, 1.2, "2-3%", _X,
        "Leadership Principles dominate every round. Expect deep behavioral + technical bars. "
        "Bar raiser process adds extra scrutiny.",
    ),
    "netflix": CompanyEntry(
        _F, 1.35, 1.15, "2-5%", _X,
        "Culture of freedom and responsibility. Very senior-oriented hiring. Expects strong "
        "ownership, judgment, and domain mastery.",
    ),
    "microsoft": CompanyEntry(
        _F, 1.35, 1.2, "2-4%", _X,
        "Structured loop interviews with growth mindset evaluation. Strong emphasis on coding, "
        "system design, and collaboration.",
    ),
    "nvidia": CompanyEntry(
        _F, 1.45, 1.25, "1-3%", _X,
        "Deeply technical interviews focused on GPU architecture, CUDA, and systems programming. "
        "Hardware-software co-design knowledge is a major differentiator.",
    ),
    "openai": CompanyEntry(
        _F, 1.5, 1.3, "<1%", _X,
        "Extremely competitive. Expects world-class ML/AI fundamentals, strong coding, and mission "
        "alignment. Research-oriented candidates need publications or equivalent impact.",
    ),
    "anthropic": CompanyEntry(
        _F, 1.5, 1.3, "<1%", _X,
        "Focuses on AI safety alignment, strong technical fundamentals, and research depth. "
        "Extremely selective with emphasis on thoughtful reasoning.",
    ),
    "jane street": CompanyEntry(
        _F, 1.5, 1.3, "<1%", _X,
        "Probability, mental math, and functional programming (OCaml). Multiple technical rounds "
        "with brain teasers and market-making simulations.",
    ),
    "citadel": CompanyEntry(
        _F, 1.45, 1.25, "1-2%", _X,
        "Quant-heavy interviews with probability, statistics, and algorithmic challenges. Expects "
        "exceptional problem-solving speed and mathematical maturity.",
        ("citadel securities",),
    ),
    "two sigma": CompanyEntry(
        _F, 1.45, 1.25, "1-2%", _X,
        "Data-driven culture. Interviews test statistical reasoning, ML, and systems thinking. "
        "Strong emphasis on intellectual curiosity.",
    ),
    "de shaw": CompanyEntry(
        _F, 1.45, 1.25, "1-3%", _X,
        "Quant and tech roles test algorithmic depth, probability theory, and system design. "
        "Known for rigorous multi-round processes.",
        ("d.e. shaw", "d. e. shaw"),
    ),
    # BIG_TECH
    "uber": CompanyEntry(
        _BT, 1.25, 1.15, "3-5%", _VH,
        "System design focus on distributed systems and real-time data. Strong coding bar with "
        "emphasis on scalability.",
    ),
    "airbnb": CompanyEntry(
        _BT, 1.25, 1.15, "3-5%", _VH,
        "Cross-functional interviews with strong culture-fit component. Values-driven hiring with "
        "emphasis on belonging and craft.",
    ),
    "salesforce": CompanyEntry(
        _BT, 1.2, 1.1, "5-8%", _VH,
        "Cloud platform expertise valued. Mix of technical and behavioral rounds with emphasis on "
        "customer success mindset.",
    ),
    "shopify": CompanyEntry(
        _BT, 1.2, 1.1, "4-7%", _VH,
        "Life story interview + technical deep dive. Values entrepreneurial mindset and builder "
        "mentality.",
    ),
    "spotify": CompanyEntry(
        _BT, 1.2, 1.1, "4-7%", _VH,
        "Autonomous squad culture. Interviews test technical skills plus collaboration and "
        "data-driven decision making.",
    ),
    "stripe": CompanyEntry(
        _BT, 1.3, 1.2, "2-4%", _VH,
        "Extremely high coding bar. Bug squash and system design rounds. Looks for exceptional "
        "attention to detail and developer empathy.",
    ),
    "linkedin": CompanyEntry(
        _BT, 1.25, 1.15, "3-5%", _VH,
        "Standard big tech loop with coding, system design, and behavioral. Values transformation "
        "and results-oriented culture.",
    ),
    "twitter": CompanyEntry(
        _BT, 1.2, 1.1, "4-7%", _VH,
        "Real-time systems focus. Emphasis on distributed systems, data pipelines, and scaling.",
        ("x", "x corp"),
    ),
    "snap": CompanyEntry(
        _BT, 1.2, 1.1, "4-7%", _VH,
        "Mobile and AR/VR focus. Technical interviews test mobile development, camera systems, "
        "and real-time processing.",
        ("snapchat",),
    ),
    "tiktok": CompanyEntry(
        _BT, 1.25, 1.15, "3-5%", _VH,
        "Fast-paced culture with strong algorithmic focus. Emphasis on recommendation systems "
        "and large-scale data processing.",
        ("bytedance",),
    ),
    "oracle": CompanyEntry(
        _BT, 1.2, 1.1, "5-8%", _VH,
        "Database and cloud infrastructure focus. Multiple technical rounds with system design "
        "emphasis.",
    ),
    "adobe": CompanyEntry(
        _BT, 1.2, 1.1, "5-8%", _VH,
        "Creative technology focus. Interviews emphasize software architecture, user experience "
        "thinking, and technical depth.",
    ),
    "palantir": CompanyEntry(
        _BT, 1.3, 1.2, "2-4%", _VH,
        "Decomposition and forward-deployed engineering focus. Tests problem decomposition, "
        "system design, and mission-driven thinking.",
    ),
    "databricks": CompanyEntry(
        _BT, 1.3, 1.15, "3-5%", _VH,
        "Data engineering and Spark expertise valued. Strong emphasis on distributed systems and "
        "data platform architecture.",
    ),
    "snowflake": CompanyEntry(
        _BT, 1.25, 1.1, "4-6%", _VH,
        "Cloud data platform focus. System design and database internals knowledge tested "
        "thoroughly.",
    ),
    # TOP_FINANCE
    "goldman sachs": CompanyEntry(
        _FIN, 1.35, 1.2, "2-4%", _VH,
        "Superday format with multiple rounds. Tests financial knowledge, problem-solving, and "
        "cultural fit. Engineering roles test system design and coding.",
        ("goldman",),
    ),
    "jp morgan": CompanyEntry(
        _FIN, 1.3, 1.2, "3-5%", _VH,
        "Structured process with HireVue and superday. Tests financial acumen, technical skills, "
        "and leadership potential.",
        ("jpmorgan", "jpmorgan chase", "j.p. morgan"),
    ),
    "morgan stanley": CompanyEntry(
        _FIN, 1.3, 1.2, "3-5%", _VH,
        "Technology division has strong coding bars. Finance roles test market knowledge and "
        "analytical thinking.",
    ),
    "blackstone": CompanyEntry(
        _FIN, 1.4, 1.25, "1-3%", _X,
        "PE/investment focus with extreme selectivity. Tests financial modeling, deal analysis, "
        "and leadership under pressure.",
    ),
    "blackrock": CompanyEntry(
        _FIN, 1.3, 1.15, "3-5%", _VH,
        "Asset management focus. Tests quantitative skills, market understanding, and Aladdin "
        "platform knowledge for tech roles.",
    ),
    "bloomberg": CompanyEntry(
        _FIN, 1.3, 1.15, "3-5%", _VH,
        "Terminal-centric culture. Strong C++ coding bar for engineering. Tests data structure "
        "knowledge and financial data processing.",
    ),
    "bank of america": CompanyEntry(
        _FIN, 1.25, 1.15, "4-6%", _VH,
        "Structured interview process with behavioral and technical rounds. Values teamwork and "
        "client-focused mindset.",
        ("bofa",),
    ),
    "barclays": CompanyEntry(
        _FIN, 1.25, 1.15, "4-6%", _VH,
        "Investment banking and technology roles with structured assessment centers. Strength in "
        "global markets.",
    ),
    "kkr": CompanyEntry(
        _FIN, 1.4, 1.25, "1-3%", _X,
        "Private equity focus with case studies and LBO modeling. Extremely competitive with "
        "emphasis on deal judgment.",
    ),
    "point72": CompanyEntry(
        _FIN, 1.35, 1.2, "2-4%", _VH,
        "Hedge fund with quantitative focus. Tests statistical reasoning, market intuition, and "
        "analytical rigor.",
    ),
    # UNICORN
    "figma": CompanyEntry(
        _U, 1.25, 1.1, "3-6%", _HI,
        "Design-engineering culture. Tests product thinking, frontend expertise, and "
        "collaboration with designers.",
    ),
    "notion": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Small team, high bar. Values product sense, clean code, and ability to work across the "
        "stack.",
    ),
    "vercel": CompanyEntry(
        _U, 1.2, 1.05, "5-8%", _HI,
        "Developer tooling focus. Tests understanding of web performance, edge computing, and "
        "frontend architecture.",
    ),
    "scale ai": CompanyEntry(
        _U, 1.25, 1.15, "3-6%", _HI,
        "AI/ML data infrastructure focus. Tests system design for data pipelines and ML "
        "engineering fundamentals.",
        ("scale",),
    ),
    "discord": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Real-time communication systems. Tests distributed systems, WebSocket architecture, and "
        "scaling challenges.",
    ),
    "coinbase": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Crypto/blockchain focus. Tests security mindset, distributed systems, and financial "
        "engineering.",
    ),
    "instacart": CompanyEntry(
        _U, 1.15, 1.05, "5-8%", _HI,
        "Marketplace and logistics optimization. Tests algorithm design, system design, and "
        "product thinking.",
    ),
    "doordash": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Logistics and marketplace focus. Tests optimization algorithms, system design, and "
        "real-time data processing.",
    ),
    "plaid": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Fintech infrastructure focus. Tests API design, security, and financial data systems.",
    ),
    "ramp": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Fast-growing fintech. Tests full-stack ability, product thinking, and speed of "
        "execution.",
    ),
    "rippling": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "HR/IT platform with high engineering bar. Tests system design, coding speed, and "
        "product-minded engineering.",
    ),
    "anduril": CompanyEntry(
        _U, 1.25, 1.15, "3-6%", _HI,
        "Defense tech with systems engineering focus. Tests real-time systems, C++/Rust, and "
        "hardware-software integration.",
    ),
    "datadog": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Observability platform. Tests distributed systems, data pipeline design, and "
        "performance engineering.",
    ),
    "cloudflare": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Edge computing and networking. Tests systems programming, networking fundamentals, and "
        "performance optimization.",
    ),
    "robinhood": CompanyEntry(
        _U, 1.2, 1.1, "4-7%", _HI,
        "Fintech with emphasis on reliability and security. Tests system design for financial "
        "systems and real-time trading.",
    ),
    "mongodb": CompanyEntry(
        _U, 1.15, 1.05, "5-8%", _HI,
        "Database internals and distributed systems focus. Tests storage engine knowledge and "
        "data modeling.",
    ),
    # GROWTH: usually inferred from JD wording; a few are listed for direct matches
    "linear": CompanyEntry(
        _G, 1.1, 1.05, "8-12%", _MOD,
        "Small team with high craft standards. Tests product sense and engineering taste.",
    ),
    "supabase": CompanyEntry(
        _G, 1.1, 1.05, "8-12%", _MOD,
        "Open source database platform. Tests PostgreSQL knowledge, API design, and developer "
        "tooling.",
    ),
    "retool": CompanyEntry(
        _G, 1.1, 1.05, "8-12%", _MOD,
        "Internal tools platform. Tests full-stack engineering and product-minded development.",
    ),
    "cursor": CompanyEntry(
        _G, 1.15, 1.05, "5-10%", _HI,
        "AI-powered developer tools. Tests ML engineering, editor architecture, and developer "
        "experience design.",
    ),
}

ALIAS_MAP: dict[str, str] = {
    alias: canonical
    for canonical, entry in COMPANY_DATABASE.items()
    for alias in entry.aliases
}

_TRAILING_PUNCT_RE = re.compile(r"[,.]$")
_CORPORATE_SUFFIX_RE = re.compile(
    r"\s*(inc\.?|llc\.?|corp\.?|corporation|co\.?|ltd\.?|limited|plc|group|holdings"
    r"|technologies|technology|labs|laboratory|laboratories)\s*$",
    re.IGNORECASE,
)

# First match wins when the company itself is unknown
TIER_INFERENCE_PATTERNS: list[tuple[re.Pattern, CompanyTier, float]] = [
    (re.compile(r"fortune\s*100\b", re.I), _BT, 1.2),
    (re.compile(r"fortune\s*500\b", re.I), _BT, 1.15),
    (re.compile(r"series\s*[de]\b", re.I), _U, 1.15),
    (re.compile(r"series\s*[bc]\b", re.I), _G, 1.1),
    (re.compile(r"series\s*a\b", re.I), _G, 1.05),
    (re.compile(r"\bunicorn\b", re.I), _U, 1.15),
    (re.compile(r"ipo|pre-ipo|publicly\s*traded", re.I), _BT, 1.15),
    (re.compile(r"faang|big\s*tech|top-tier\s*tech", re.I), _F, 1.3),
    (re.compile(r"hedge\s*fund|quant\s*fund", re.I), _FIN, 1.3),
    (re.compile(r"investment\s*bank", re.I), _FIN, 1.25),
    (re.compile(r"private\s*equity", re.I), _FIN, 1.3),
]


class TierMeta(NamedTuple):
    acceptance_rate: str
    competition_level: CompetitionLevel
    bar_description: str


TIER_META: dict[CompanyTier, TierMeta] = {
    CompanyTier.FAANG_PLUS: TierMeta(
        "1-3%", _X,
        "Top-tier company with extremely competitive interview process. Expect multiple "
        "technical and behavioral rounds with high rejection rates.",
    ),
    CompanyTier.BIG_TECH: TierMeta(
        "3-7%", _VH,
        "Major tech company with rigorous interview loop. Expect coding, system design, "
        "and behavioral rounds.",
    ),
    CompanyTier.TOP_FINANCE: TierMeta(
        "2-5%", _VH,
        "Top financial institution with demanding interview process. Expect technical "
        "rounds plus domain-specific assessment.",
    ),
    CompanyTier.UNICORN: TierMeta(
        "4-8%", _HI,
        "High-growth company with selective hiring. Expect focus on product thinking "
        "and technical depth.",
    ),
    CompanyTier.GROWTH: TierMeta(
        "8-15%", _MOD,
        "Growth-stage company with standard technical interview process. Values "
        "adaptability and shipping speed.",
    ),
    CompanyTier.STANDARD: TierMeta(
        "10-20%", _MOD,
        "Standard interview process. Focus on demonstrating core competencies and "
        "cultural fit.",
    ),
}

DIFFERENTIATION_STRATEGIES: dict[CompanyTier, list[str]] = {
    CompanyTier.FAANG_PLUS: [
        "Demonstrate system design thinking at scale: discuss trade-offs with specific numbers (QPS, latency, storage)",
        "Lead with metrics: quantify every achievement with business impact (revenue, users, performance gains)",
        "Show depth in one area rather than breadth; FAANG interviewers value T-shaped expertise",
        "Prepare company-specific behavioral stories using their leadership principles or core values",
        "Practice explaining complex technical concepts simply; communication is a hidden bar",
        "Build or contribute to open-source projects that demonstrate algorithmic sophistication",
        "Research recent company blog posts and reference their specific technical challenges in your answers",
        "Prepare 2-3 stories showing ownership of end-to-end projects from design to production",
    ],
    CompanyTier.BIG_TECH: [
        "Highlight cross-functional collaboration stories that show product thinking",
        "Demonstrate understanding of their specific tech stack and architecture patterns",
        "Show metrics-driven decision making with A/B testing and data-informed approaches",
        "Prepare examples of technical trade-offs you made and their business impact",
        "Research the company engineering blog and reference specific technical decisions",
        "Demonstrate ability to work autonomously while aligning with team goals",
    ],
    CompanyTier.TOP_FINANCE: [
        "Combine technical depth with financial domain knowledge: show you understand the business",
        "Demonstrate experience with low-latency systems, real-time data, or high-throughput processing",
        "Prepare for probability and statistics questions even for engineering roles",
        "Show attention to detail and precision; errors in finance have outsized consequences",
        "Highlight any experience with regulatory compliance, data security, or audit trails",
        "Prepare examples of working under pressure with strict deadlines",
    ],
    CompanyTier.UNICORN: [
        "Show scrappiness and ability to ship fast with quality; unicorns value speed",
        "Demonstrate full-stack thinking even if applying for a specialized role",
        "Highlight experience building 0-to-1 products or features with ambiguous requirements",
        "Show product sense: explain how technical decisions impact user experience",
        "Prepare examples of wearing multiple hats and adapting to changing priorities",
        "Demonstrate passion for the company mission and product with specific usage examples",
    ],
    CompanyTier.GROWTH: [
        "Emphasize adaptability and willingness to work across the stack",
        "Show examples of building with limited resources and making pragmatic trade-offs",
        "Demonstrate initiative and ability to identify and solve problems autonomously",
        "Highlight experience with rapid iteration and shipping incrementally",
    ],
    CompanyTier.STANDARD: [],
}

_INTERN_STRATEGY = (
    "As an intern candidate, emphasize relevant coursework, personal projects, and "
    "learning velocity over years of experience"
)
_ML_STRATEGY = (
    "Prepare to discuss ML model lifecycle: training, evaluation, deployment, and "
    "monitoring in production"
)
_DISTRIBUTED_STRATEGY = (
    "Prepare distributed systems design examples with specific discussion of consistency, "
    "availability, and partition tolerance trade-offs"
)
_ML_RE = re.compile(r"machine learning|\bml\b|\bai\b")


def normalize_company_name(name: str) -> str:
    """Lowercase, strip corporate suffixes and resolve aliases."""
    normalized = _TRAILING_PUNCT_RE.sub("", name.lower().strip())
    normalized = _CORPORATE_SUFFIX_RE.sub("", normalized).rstrip(" ,")
    return ALIAS_MAP.get(normalized, normalized)


def generate_differentiation_strategies(
    tier: CompanyTier,
    experience_level: ExperienceLevel,
    extracted_jd: ExtractedJD | None = None,
) -> list[str]:
    strategies = list(DIFFERENTIATION_STRATEGIES[tier][:4])

    if experience_level == ExperienceLevel.INTERN:
        strategies.append(_INTERN_STRATEGY)

    if extracted_jd is not None:
        jd_text = " ".join(
            extracted_jd.must_have + extracted_jd.nice_to_have + extracted_jd.keywords
        ).lower()
        if _ML_RE.search(jd_text):
            strategies.append(_ML_STRATEGY)
        if "distributed" in jd_text or "microservices" in jd_text:
            strategies.append(_DISTRIBUTED_STRATEGY)

    return strategies[:MAX_STRATEGIES]


def _jd_text(extracted_jd: ExtractedJD | None) -> str:
    if extracted_jd is None:
        return ""
    return " ".join([
        extracted_jd.company_name or "",
        *extracted_jd.must_have,
        *extracted_jd.nice_to_have,
        *extracted_jd.keywords,
        *extracted_jd.seniority_signals,
    ])


def _build_context(
    company_name: str,
    tier: CompanyTier,
    factor: float,
    is_intern: bool,
    acceptance_rate: str,
    competition_level: CompetitionLevel,
    bar_description: str,
    strategies: list[str],
) -> CompanyDifficultyContext:
    capped = min(MAX_ADJUSTMENT_FACTOR, factor)
    return CompanyDifficultyContext(
        company_name=company_name,
        tier=tier,
        difficulty_score=round(capped * 100),
        is_intern=is_intern,
        acceptance_rate_estimate=acceptance_rate,
        competition_level=competition_level,
        interview_bar_description=bar_description,
        adjustment_factor=capped,
        differentiation_strategies=strategies,
        version=COMPANY_DIFFICULTY_VERSION,
    )


def resolve_company_difficulty(
    company_name: str | None,
    experience_level: ExperienceLevel = ExperienceLevel.ENTRY,
    extracted_jd: ExtractedJD | None = None,
) -> CompanyDifficultyContext:
    """Resolve the difficulty context for an employer. Deterministic."""
    is_intern = experience_level == ExperienceLevel.INTERN
    resolved = normalize_company_name(company_name) if company_name else ""

    entry = COMPANY_DATABASE.get(resolved) if resolved else None
    if entry is not None:
        factor = entry.difficulty_multiplier
        if is_intern:
            factor = round(factor * entry.intern_multiplier, 2)
        logger.info("Company %r resolved to %s (factor %.2f)", company_name, entry.tier.value, factor)
        return _build_context(
            company_name or resolved,
            entry.tier,
            factor,
            is_intern,
            entry.acceptance_rate_estimate,
            entry.competition_level,
            entry.interview_bar_description,
            generate_differentiation_strategies(entry.tier, experience_level, extracted_jd),
        )

    jd_text = _jd_text(extracted_jd)
    for pattern, tier, multiplier in TIER_INFERENCE_PATTERNS:
        if pattern.search(jd_text):
            factor = round(multiplier * INFERRED_INTERN_MULTIPLIER, 2) if is_intern else multiplier
            meta = TIER_META[tier]
            logger.info("Company %r inferred as %s from JD wording", company_name, tier.value)
            return _build_context(
                company_name or "Unknown",
                tier,
                factor,
                is_intern,
                meta.acceptance_rate,
                meta.competition_level,
                meta.bar_description,
                generate_differentiation_strategies(tier, experience_level, extracted_jd),
            )

    meta = TIER_META[CompanyTier.STANDARD]
    return _build_context(
        company_name or "Unknown",
        CompanyTier.STANDARD,
        1.0,
        is_intern,
        meta.acceptance_rate,
        meta.competition_level,
        meta.bar_description,
        [],
    )
