# backend/app/schemas/brief.py
import enum

from pydantic import BaseModel, ConfigDict


class AssetType(str, enum.Enum):
    WHITE_PAPER = "White Paper"
    COMPARISON_GUIDE = "Comparison Guide"
    SPONSORED_BLOG_POST = "Sponsored Blog Post"

    @classmethod
    def parse(cls, value: "str | AssetType") -> "AssetType":
        """
        Resolve a display label (e.g. "White Paper") to the enum member.

        Raises ValueError for anything outside the fixed set.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unknown asset type: {value!r}")


# Fields that must be non-blank before a draft can be generated
REQUIRED_BRIEF_FIELDS = (
    "audience",
    "industry",
    "solution",
    "differentiators",
    "tone",
    "cta",
)


class Brief(BaseModel):
    """
    Structured brief filled in by the user. All free text; competitors and
    notes are optional.
    """

    model_config = ConfigDict(extra="ignore")

    audience: str = ""
    industry: str = ""
    solution: str = ""
    differentiators: str = ""
    competitors: str = ""
    tone: str = ""
    cta: str = ""
    notes: str = ""

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_BRIEF_FIELDS if not getattr(self, name).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()
