# src/content_parser/guidelines.py
from .model import BrandGuidelines, ScoringWeights, ToneKeywords

VOICE_ATTRIBUTES = ("calm", "medical", "reassuring", "precise")

APPROVED_TERMS = (
    "predictive", "monitoring", "respiratory", "biomarker", "clinical",
    "prevention", "early detection", "healthcare", "medical-grade",
    "scientific", "evidence-based", "validated", "precision", "accuracy",
    "patient", "caregiver", "clinician", "health", "breathing", "asthma",
    "inflammation", "FeNO", "VOCs", "sensor", "wearable", "continuous"
)

# Startup hype language
FORBIDDEN_TERMS = (
    "revolutionary", "game-changing", "disruptive", "cutting-edge",
    "amazing", "incredible", "awesome", "mind-blowing", "breakthrough",
    "world-class", "best-in-class", "paradigm shift", "synergy",
    "leverage", "scalable solution", "next-generation", "state-of-the-art"
)

TONE_KEYWORDS = ToneKeywords(
    calm=(
        "peaceful", "steady", "stable", "consistent", "reliable",
        "gentle", "quiet", "smooth", "balanced", "controlled"
    ),
    medical=(
        "clinical", "diagnostic", "therapeutic", "medical", "healthcare",
        "treatment", "patient", "physician", "hospital", "evidence-based",
        "peer-reviewed", "validated", "approved", "certified"
    ),
    reassuring=(
        "confident", "trusted", "secure", "protected", "safe",
        "reliable", "dependable", "proven", "established", "supported"
    ),
    precise=(
        "accurate", "specific", "measured", "quantified", "exact",
        "detailed", "systematic", "methodical", "rigorous", "scientific"
    ),
)

MEDICAL_TERMS = (
    "FeNO", "fractional exhaled nitric oxide", "VOCs", "volatile organic compounds",
    "biomarker", "inflammation", "respiratory", "asthma", "airway",
    "pulmonary", "breathing", "exhaled breath", "clinical trial",
    "FDA", "medical device", "diagnostic", "monitoring", "sensor"
)

KEY_PHRASES = (
    "predictive monitoring", "early detection", "respiratory health",
    "asthma prevention", "biomarker analysis", "clinical validation",
    "medical device", "healthcare innovation", "patient outcomes"
)

PLACEHOLDER_PATTERNS = (
    r"lorem ipsum",
    r"placeholder",
    r"sample text",
    r"dummy text",
    r"\[.*?\]",  # [insert content]
    r"\{.*?\}",  # {variable}
    r"xxx+",
    r"tbd|to be determined",
    r"coming soon",
)

DEFAULT_GUIDELINES = BrandGuidelines(
    voice_attributes=VOICE_ATTRIBUTES,
    approved_terms=APPROVED_TERMS,
    forbidden_terms=FORBIDDEN_TERMS,
    tone_keywords=TONE_KEYWORDS,
    medical_terms=MEDICAL_TERMS,
    key_phrases=KEY_PHRASES,
    placeholder_patterns=PLACEHOLDER_PATTERNS,
)

DEFAULT_WEIGHTS = ScoringWeights()


def get_default_guidelines() -> BrandGuidelines:
    return DEFAULT_GUIDELINES
