from shoe_assistant.llm.prompts import TRANSLATIONS, build_analysis_prompt, supported_languages


def test_english_prompt_contains_template_and_notes():
    prompt = build_analysis_prompt("en")
    assert prompt.startswith(TRANSLATIONS["en"]["system_prompt"])
    assert '"brandAndModel": "Shoe brand and model name"' in prompt
    assert '"unspecified"' in prompt
    assert "The user has provided the brand" not in prompt


def test_spanish_prompt():
    prompt = build_analysis_prompt("ES")
    assert "Material de la lengüeta" in prompt


def test_unknown_language_falls_back_to_english():
    assert build_analysis_prompt("fr") == build_analysis_prompt("en")
    assert build_analysis_prompt(None) == build_analysis_prompt("en")


def test_user_hints_are_appended():
    prompt = build_analysis_prompt(
        "en", brand="Nike", problem_description="Mud stains", affected_part="Outsole"
    )
    assert prompt.endswith(
        ' The user has provided the brand: "Nike".'
        ' The user has described the following issue: "Mud stains".'
        ' The affected part of the shoe is: "Outsole".'
    )


def test_blank_hints_are_ignored():
    assert build_analysis_prompt("en", brand="  ", affected_part="") == build_analysis_prompt("en")


def test_supported_languages():
    assert supported_languages() == ["en", "es"]


def test_prompt_asks_for_recommended_tags_in_every_language():
    for language in supported_languages():
        assert '"recommendedTags": [' in build_analysis_prompt(language)
