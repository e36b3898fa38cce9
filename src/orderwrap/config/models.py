"""Pydantic models describing parsing configuration."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator


DEFAULT_CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "food": ["food", "grocery", "restaurant", "meal", "snack", "beverage", "drink", "coffee", "tea", "wine", "beer"],
    "health": ["vitamin", "supplement", "medicine", "pharmacy", "health", "wellness", "fitness", "protein", "organic"],
    "home": ["home", "furniture", "decor", "kitchen", "bath", "bedding", "lighting", "storage", "organizer", "cleaning"],
    "electronics": ["electronics", "computer", "phone", "tablet", "camera", "headphone", "speaker", "charger", "cable", "tech"],
    "subscriptions": ["subscription", "prime", "music", "video", "streaming", "service", "membership"],
    "clothing": ["clothing", "clothes", "shirt", "pants", "shoes", "dress", "jacket", "accessory", "jewelry", "watch"],
    "kids_pets": ["toy", "baby", "child", "kid", "pet", "dog", "cat", "animal", "diaper", "stroller"],
    "travel": ["travel", "luggage", "suitcase", "hotel", "flight", "car rental", "passport"],
    "discretionary": ["book", "game", "entertainment", "hobby", "craft", "art", "music", "movie"],
}

DEFAULT_REQUIRED_COLUMNS: List[str] = [
    "to",
    "payments",
    "date",
    "total",
    "refund",
    "gift",
    "order_id",
    "order_url",
    "items",
]

DEFAULT_DROPPED_COLUMNS: List[str] = ["shipping", "shipping_refund", "tax"]


class CategoryRule(BaseModel):
    name: str
    keywords: List[str]

    @field_validator("name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("category name must not be blank")
        return value

    @field_validator("keywords")
    @classmethod
    def normalize_keywords(cls, value: List[str]) -> List[str]:
        keywords = [keyword.strip().lower() for keyword in value if keyword.strip()]
        if not keywords:
            raise ValueError("keywords must not be empty")
        return keywords


def _default_rules() -> List[CategoryRule]:
    return [
        CategoryRule(name=name, keywords=keywords)
        for name, keywords in DEFAULT_CATEGORY_KEYWORDS.items()
    ]


class CategoryConfig(BaseModel):
    """Ordered keyword rules; the first matching rule wins."""

    rules: List[CategoryRule] = Field(default_factory=_default_rules)
    default: str = "other"

    @field_validator("default")
    @classmethod
    def normalize_default(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("default category must not be blank")
        return value

    @model_validator(mode="after")
    def ensure_unique_names(self) -> "CategoryConfig":
        seen: set[str] = set()
        for idx, rule in enumerate(self.rules):
            if rule.name in seen:
                raise ValueError(f"rules[{idx}].name duplicates category {rule.name}")
            seen.add(rule.name)
        return self


class ColumnsConfig(BaseModel):
    required: List[str] = Field(default_factory=lambda: list(DEFAULT_REQUIRED_COLUMNS))
    dropped: List[str] = Field(default_factory=lambda: list(DEFAULT_DROPPED_COLUMNS))

    @model_validator(mode="after")
    def check_overlap(self) -> "ColumnsConfig":
        overlap = sorted(set(self.required) & set(self.dropped))
        if overlap:
            raise ValueError(f"columns both required and dropped: {', '.join(overlap)}")
        return self


class AttributionConfig(BaseModel):
    strict_threshold: float = 60
    loose_threshold: float = 40
    min_containment_length: int = 3
    token_typo_ratio: float = 80
    unknown_label: str = "Unknown"

    @model_validator(mode="after")
    def check_thresholds(self) -> "AttributionConfig":
        for name in ("strict_threshold", "loose_threshold", "token_typo_ratio"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be within 0..100")
        if self.strict_threshold < self.loose_threshold:
            raise ValueError("strict_threshold must be >= loose_threshold")
        if self.min_containment_length < 0:
            raise ValueError("min_containment_length must be >= 0")
        if not self.unknown_label.strip():
            raise ValueError("unknown_label must not be blank")
        return self


class ParsingConfig(BaseModel):
    categories: CategoryConfig = Field(default_factory=CategoryConfig)
    columns: ColumnsConfig = Field(default_factory=ColumnsConfig)
    attribution: AttributionConfig = Field(default_factory=AttributionConfig)
    zero_tolerance: float = 0.001
    date_format: str = "%Y-%m-%d"

    @model_validator(mode="after")
    def check_tolerance(self) -> "ParsingConfig":
        if self.zero_tolerance < 0:
            raise ValueError("zero_tolerance must be >= 0")
        return self
