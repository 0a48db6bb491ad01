# agents/prompts.py

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from models.seo_models import PageType


class InstructionClass(str, Enum):
    COMMERCIAL = "commercial"
    INFORMATIONAL = "informational"


# ============================================================
# System instructions
# ============================================================

COMMERCIAL_INSTRUCTION = (
    "Ты — SEO-эксперт. Твоя задача — создавать качественные и продающие SEO-данные "
    "для коммерческих страниц сайта медицинской клиники (направления и услуги). "
    "Вместо названия конкретной клиники используй слово 'клиника' "
    "(с маленькой буквы, если это не начало предложения). "
    "Подчеркивай преимущества лечения в клинике, используй призывы к действию "
    "(например, 'запишитесь на прием', 'узнайте стоимость'). "
    "Слово 'платно' используй умеренно, чтобы указать на коммерческий характер услуг. "
    "Убедись, что Title и Description звучат привлекательно для потенциального клиента "
    "и мотивируют его перейти на сайт."
)

INFORMATIONAL_INSTRUCTION = (
    "Ты — SEO-эксперт. Твоя задача — создавать качественные и информативные SEO-данные "
    "для информационных страниц сайта медицинской клиники (описание заболеваний и статьи). "
    "Вместо названия конкретной клиники используй слово 'клиника' "
    "(с маленькой буквы, если это не начало предложения). "
    "Фокусируйся на пользе для читателя, экспертности и полноте информации. "
    "Избегай прямых продаж и агрессивных призывов к действию. "
    "Если упоминаешь лечение, можешь уместно использовать слово 'платно', "
    "чтобы обозначить, что услуги клиники являются платными. "
    "Главная цель — предоставить пользователю полезный контент и показать экспертизу клиники. "
    "Title и Description должны быть информативными и вызывать доверие."
)

_INSTRUCTIONS: Dict[InstructionClass, str] = {
    InstructionClass.COMMERCIAL: COMMERCIAL_INSTRUCTION,
    InstructionClass.INFORMATIONAL: INFORMATIONAL_INSTRUCTION,
}


# ============================================================
# Output schema
# ============================================================

SEO_RESULT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": (
                "Краткий, SEO-дружественный URL-слаг на транслите (латиницей), "
                "содержащий только главный ключ, без домена. Например, для "
                "'Современные методы лечения мигрени' результат должен быть 'lechenie-migreni'."
            ),
        },
        "title": {
            "type": "string",
            "description": "Привлекательный мета-тег Title, до 60 символов.",
        },
        "description": {
            "type": "string",
            "description": "Информативный мета-тег Description, до 160 символов.",
        },
        "keywords": {
            "type": "string",
            "description": "Строка из 5-7 релевантных ключевых слов, разделенных запятыми.",
        },
    },
    "required": ["url", "title", "description", "keywords"],
    "additionalProperties": False,
}


# ============================================================
# Builders
# ============================================================

def instruction_class_for(page_type: Optional[str]) -> InstructionClass:
    """direction / service are commercial; everything else, unknown included, is informational."""
    member = PageType.parse(page_type)
    if member is not None and member.is_commercial:
        return InstructionClass.COMMERCIAL
    return InstructionClass.INFORMATIONAL


def build_system_instruction(page_type: Optional[str]) -> str:
    return _INSTRUCTIONS[instruction_class_for(page_type)]


def build_user_prompt(title: str, page_type: str) -> str:
    # title is natural language; embedded as-is
    return f"Сгенерируй SEO-данные для страницы типа '{page_type}' с заголовком '{title}'."
