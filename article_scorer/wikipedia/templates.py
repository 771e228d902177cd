"""Wiki link templates derived from the two title lookups.

Only the templates that apply are produced:

- ja exists: disambiguation template, or the redirect pair, or the plain link
- ja missing: the "no Wikipedia article" template, plus the English-edition
  link when the title exists in English
"""

from article_scorer.wikipedia.schemas import TemplateOutput, WikipediaCheckResult


def generate_templates(
    ja_result: WikipediaCheckResult,
    en_result: WikipediaCheckResult,
) -> list[TemplateOutput]:
    """Build the applicable templates for a title."""
    templates: list[TemplateOutput] = []
    ja_title = ja_result.resolved_title
    en_title = en_result.resolved_title

    if ja_result.exists:
        if ja_result.is_disambiguation:
            templates.append(
                TemplateOutput(
                    name="ウィキペディア曖昧さ回避",
                    template=f"{{{{ウィキペディア曖昧さ回避|{ja_title}}}}}",
                    description="曖昧さ回避ページ",
                )
            )
        elif ja_result.is_redirect:
            templates.append(
                TemplateOutput(
                    name="ウィキペディア",
                    template=f"{{{{ウィキペディア|{ja_title}}}}}",
                    description="日本語版Wikipedia（リダイレクト解決済み）",
                )
            )
            templates.append(
                TemplateOutput(
                    name="ウィキペディア2",
                    template=f"{{{{ウィキペディア2|{ja_title}}}}}",
                    description="記事名と表示名が異なる場合",
                )
            )
        else:
            templates.append(
                TemplateOutput(
                    name="ウィキペディア",
                    template=f"{{{{ウィキペディア|{ja_title}}}}}",
                    description="日本語版Wikipediaリンク",
                )
            )
    else:
        templates.append(
            TemplateOutput(
                name="ウィキペディア無し",
                template="{{ウィキペディア無し}}",
                description="日本語版に記事なし",
            )
        )
        if en_result.exists:
            templates.append(
                TemplateOutput(
                    name="ウィキペディア英語版",
                    template=f"{{{{ウィキペディア英語版|{en_title}}}}}",
                    description="英語版のみに存在",
                )
            )

    return templates
