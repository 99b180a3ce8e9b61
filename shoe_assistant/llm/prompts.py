from __future__ import annotations

import json

TRANSLATIONS = {
    "en": {
        "system_prompt": (
            "You are a shoe product e-shop assistant trained to identify shoe models, "
            "materials, and provide cleaning recommendations."
        ),
        "response_format": {
            "brandAndModel": "Shoe brand and model name",
            "materials": {
                "upper": "Material of the upper",
                "lining": "Material of the lining",
                "insole": "Material of the insole",
                "outsole": "Material of the outsole",
                "laces": "Material of the laces",
                "tongue": "Material of the tongue",
            },
            "cleaningRecommendations": [
                {
                    "affectedPart": "The affected part of the shoe",
                    "recommendations": ["List of cleaning recommendations"],
                }
            ],
            "generalCare": ["General care tips for the shoe"],
            "recommendedTags": ["Short product-style care tags, e.g. \"suede cleaner\", \"waterproofing\""],
        },
    },
    "es": {
        "system_prompt": (
            "Eres un asistente de tienda de calzado entrenado para identificar modelos de zapatos, "
            "materiales y proporcionar recomendaciones de limpieza."
        ),
        "response_format": {
            "brandAndModel": "Marca y modelo del zapato",
            "materials": {
                "upper": "Material de la parte superior",
                "lining": "Material del forro",
                "insole": "Material de la plantilla",
                "outsole": "Material de la suela",
                "laces": "Material de los cordones",
                "tongue": "Material de la lengüeta",
            },
            "cleaningRecommendations": [
                {
                    "affectedPart": "La parte afectada del zapato",
                    "recommendations": ["Lista de recomendaciones de limpieza"],
                }
            ],
            "generalCare": ["Consejos generales de cuidado para el zapato"],
            "recommendedTags": ["Etiquetas breves de productos de cuidado, p. ej. \"suede cleaner\", \"waterproofing\""],
        },
    },
}

DEFAULT_LANGUAGE = "en"

ANALYSIS_NOTES = """
# Notes
- If the brand and model cannot be recognized, provide your best estimate or mark it as "unknown."
- In cases where part of the material cannot be clearly identified, use "unspecified" or "possibly [type]" for transparency.
- Be as specific as possible, but avoid guessing if the information is not recognizable.
- Please format the response as JSON with the appropriate details based on the shoe in the image.
"""

IMAGE_QUALITY_PROMPT = (
    "You are an image quality analyzer. Assess if the provided image is suitable for shoe recognition. "
    "Check for issues like: too dark, too bright/overexposed, blurry, or too low resolution. "
    "If there are issues, explain what's wrong. If the image is good quality, respond with 'PASS'."
)


def supported_languages() -> list[str]:
    return sorted(TRANSLATIONS)


def build_analysis_prompt(
    language: str | None = DEFAULT_LANGUAGE,
    brand: str | None = None,
    problem_description: str | None = None,
    affected_part: str | None = None,
) -> str:
    translation = TRANSLATIONS.get((language or "").strip().lower(), TRANSLATIONS[DEFAULT_LANGUAGE])
    response_format = json.dumps(translation["response_format"], indent=2, ensure_ascii=False)

    prompt = (
        f"{translation['system_prompt']}\n\n"
        "Analyze the shoe in the provided image and return the information in the following format:\n\n"
        f"{response_format}\n"
        f"{ANALYSIS_NOTES}"
    )

    if brand and brand.strip():
        prompt += f' The user has provided the brand: "{brand.strip()}".'
    if problem_description and problem_description.strip():
        prompt += f' The user has described the following issue: "{problem_description.strip()}".'
    if affected_part and affected_part.strip():
        prompt += f' The affected part of the shoe is: "{affected_part.strip()}".'
    return prompt
