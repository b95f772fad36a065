"""Built-in templates loaded into every new template store."""

from writers_app.strategies.template_engine.models import (
    Placeholder,
    Template,
    TemplateCategory,
    TemplateMetadata,
)


def _novel_chapter() -> Template:
    return Template(
        name="Novel Chapter",
        category=TemplateCategory.NOVEL,
        description="Standard chapter template for novel writing",
        content=(
            "# Chapter {{chapter_number}}: {{chapter_title}}\n"
            "\n"
            "{{opening_scene}}\n"
            "\n"
            "---\n"
            "\n"
            "{{main_content}}\n"
            "\n"
            "---\n"
            "\n"
            "{{closing_scene}}"
        ),
        placeholders=[
            Placeholder(key="chapter_number", label="Chapter Number"),
            Placeholder(key="chapter_title", label="Chapter Title"),
            Placeholder(key="opening_scene", label="Opening Scene"),
            Placeholder(key="main_content", label="Main Content"),
            Placeholder(key="closing_scene", label="Closing Scene"),
        ],
        metadata=TemplateMetadata(tags=["fiction", "novel", "chapter"]),
    )


def _short_story() -> Template:
    return Template(
        name="Short Story",
        category=TemplateCategory.SHORT_STORY,
        description="Three-act structure for short stories",
        content=(
            "# {{title}}\n"
            "by {{author}}\n"
            "\n"
            "## Act I: Setup\n"
            "{{act_one}}\n"
            "\n"
            "## Act II: Confrontation\n"
            "{{act_two}}\n"
            "\n"
            "## Act III: Resolution\n"
            "{{act_three}}\n"
            "\n"
            "---\n"
            "\n"
            "Word Count: ~{{target_words}} words"
        ),
        placeholders=[
            Placeholder(key="title", label="Story Title"),
            Placeholder(key="author", label="Author Name"),
            Placeholder(key="act_one", label="Act I Content"),
            Placeholder(key="act_two", label="Act II Content"),
            Placeholder(key="act_three", label="Act III Content"),
            Placeholder(key="target_words", label="Target Word Count", default_value="5000"),
        ],
        metadata=TemplateMetadata(tags=["fiction", "short-story"]),
    )


def _screenplay_scene() -> Template:
    return Template(
        name="Screenplay Scene",
        category=TemplateCategory.SCREENPLAY,
        description="Standard screenplay scene format",
        content=(
            "{{scene_heading}}\n"
            "\n"
            "{{action}}\n"
            "\n"
            "{{character}}\n"
            "{{dialogue}}\n"
            "\n"
            "{{character_2}}\n"
            "({{parenthetical}})\n"
            "{{dialogue_2}}\n"
            "\n"
            "{{transition}}"
        ),
        placeholders=[
            Placeholder(
                key="scene_heading",
                label="Scene Heading",
                description="INT/EXT. LOCATION - TIME",
            ),
            Placeholder(key="action", label="Action/Description"),
            Placeholder(key="character", label="Character Name"),
            Placeholder(key="dialogue", label="Dialogue"),
            Placeholder(key="character_2", label="Second Character", required=False),
            Placeholder(key="parenthetical", label="Parenthetical", required=False),
            Placeholder(key="dialogue_2", label="Second Dialogue", required=False),
            Placeholder(key="transition", label="Transition", default_value="CUT TO:"),
        ],
        metadata=TemplateMetadata(tags=["screenplay", "script", "scene"]),
    )


def _blog_post() -> Template:
    return Template(
        name="Blog Post",
        category=TemplateCategory.BLOG_POST,
        description="SEO-optimized blog post structure",
        content=(
            "# {{title}}\n"
            "\n"
            "**Published:** {{date}}\n"
            "**Author:** {{author}}\n"
            "**Tags:** {{tags}}\n"
            "\n"
            "## Introduction\n"
            "{{introduction}}\n"
            "\n"
            "## {{section_1_title}}\n"
            "{{section_1_content}}\n"
            "\n"
            "## {{section_2_title}}\n"
            "{{section_2_content}}\n"
            "\n"
            "## {{section_3_title}}\n"
            "{{section_3_content}}\n"
            "\n"
            "## Conclusion\n"
            "{{conclusion}}\n"
            "\n"
            "---\n"
            "\n"
            "**Call to Action:** {{cta}}"
        ),
        placeholders=[
            Placeholder(key="title", label="Post Title"),
            Placeholder(key="date", label="Publication Date"),
            Placeholder(key="author", label="Author"),
            Placeholder(key="tags", label="Tags"),
            Placeholder(key="introduction", label="Introduction"),
            Placeholder(key="section_1_title", label="Section 1 Title"),
            Placeholder(key="section_1_content", label="Section 1 Content"),
            Placeholder(key="section_2_title", label="Section 2 Title"),
            Placeholder(key="section_2_content", label="Section 2 Content"),
            Placeholder(key="section_3_title", label="Section 3 Title"),
            Placeholder(key="section_3_content", label="Section 3 Content"),
            Placeholder(key="conclusion", label="Conclusion"),
            Placeholder(key="cta", label="Call to Action"),
        ],
        metadata=TemplateMetadata(tags=["blog", "article", "seo"]),
    )


def _article() -> Template:
    return Template(
        name="Article",
        category=TemplateCategory.ARTICLE,
        description="Professional article with research structure",
        content=(
            "# {{title}}\n"
            "## {{subtitle}}\n"
            "\n"
            "**Author:** {{author}}\n"
            "**Date:** {{date}}\n"
            "\n"
            "### Abstract\n"
            "{{abstract}}\n"
            "\n"
            "### Introduction\n"
            "{{introduction}}\n"
            "\n"
            "### Background\n"
            "{{background}}\n"
            "\n"
            "### Main Discussion\n"
            "{{main_discussion}}\n"
            "\n"
            "### Analysis\n"
            "{{analysis}}\n"
            "\n"
            "### Conclusion\n"
            "{{conclusion}}\n"
            "\n"
            "### References\n"
            "{{references}}"
        ),
        placeholders=[
            Placeholder(key="title", label="Article Title"),
            Placeholder(key="subtitle", label="Subtitle", required=False),
            Placeholder(key="author", label="Author"),
            Placeholder(key="date", label="Date"),
            Placeholder(key="abstract", label="Abstract"),
            Placeholder(key="introduction", label="Introduction"),
            Placeholder(key="background", label="Background"),
            Placeholder(key="main_discussion", label="Main Discussion"),
            Placeholder(key="analysis", label="Analysis"),
            Placeholder(key="conclusion", label="Conclusion"),
            Placeholder(key="references", label="References"),
        ],
        metadata=TemplateMetadata(tags=["article", "research", "academic"]),
    )


def _poetry() -> Template:
    return Template(
        name="Poetry",
        category=TemplateCategory.POETRY,
        description="Structured poetry template",
        content=(
            "# {{title}}\n"
            "*by {{author}}*\n"
            "\n"
            "{{stanza_1}}\n"
            "\n"
            "{{stanza_2}}\n"
            "\n"
            "{{stanza_3}}\n"
            "\n"
            "{{stanza_4}}\n"
            "\n"
            "---\n"
            "*{{dedication}}*"
        ),
        placeholders=[
            Placeholder(key="title", label="Poem Title"),
            Placeholder(key="author", label="Poet Name"),
            Placeholder(key="stanza_1", label="First Stanza"),
            Placeholder(key="stanza_2", label="Second Stanza"),
            Placeholder(key="stanza_3", label="Third Stanza", required=False),
            Placeholder(key="stanza_4", label="Fourth Stanza", required=False),
            Placeholder(key="dedication", label="Dedication", required=False),
        ],
        metadata=TemplateMetadata(tags=["poetry", "verse"]),
    )


def _business_letter() -> Template:
    return Template(
        name="Business Letter",
        category=TemplateCategory.BUSINESS_LETTER,
        description="Professional business letter format",
        content=(
            "{{sender_name}}\n"
            "{{sender_address}}\n"
            "{{sender_city_state_zip}}\n"
            "{{sender_email}}\n"
            "{{sender_phone}}\n"
            "\n"
            "{{date}}\n"
            "\n"
            "{{recipient_name}}\n"
            "{{recipient_title}}\n"
            "{{recipient_company}}\n"
            "{{recipient_address}}\n"
            "{{recipient_city_state_zip}}\n"
            "\n"
            "Dear {{salutation}},\n"
            "\n"
            "{{opening_paragraph}}\n"
            "\n"
            "{{body_paragraph_1}}\n"
            "\n"
            "{{body_paragraph_2}}\n"
            "\n"
            "{{closing_paragraph}}\n"
            "\n"
            "Sincerely,\n"
            "\n"
            "{{sender_name}}\n"
            "{{sender_title}}"
        ),
        placeholders=[
            Placeholder(key="sender_name", label="Your Name"),
            Placeholder(key="sender_address", label="Your Address"),
            Placeholder(key="sender_city_state_zip", label="Your City, State ZIP"),
            Placeholder(key="sender_email", label="Your Email"),
            Placeholder(key="sender_phone", label="Your Phone"),
            Placeholder(key="date", label="Date"),
            Placeholder(key="recipient_name", label="Recipient Name"),
            Placeholder(key="recipient_title", label="Recipient Title"),
            Placeholder(key="recipient_company", label="Company Name"),
            Placeholder(key="recipient_address", label="Company Address"),
            Placeholder(key="recipient_city_state_zip", label="City, State ZIP"),
            Placeholder(key="salutation", label="Salutation", default_value="Mr./Ms. Last Name"),
            Placeholder(key="opening_paragraph", label="Opening Paragraph"),
            Placeholder(key="body_paragraph_1", label="Body Paragraph 1"),
            Placeholder(key="body_paragraph_2", label="Body Paragraph 2", required=False),
            Placeholder(key="closing_paragraph", label="Closing Paragraph"),
            Placeholder(key="sender_title", label="Your Title"),
        ],
        metadata=TemplateMetadata(tags=["business", "letter", "professional"]),
    )


def default_templates() -> list[Template]:
    """Return fresh instances of the built-in templates.

    Each call creates new ids, so separate stores never share entries.
    """
    return [
        _novel_chapter(),
        _short_story(),
        _screenplay_scene(),
        _blog_post(),
        _article(),
        _poetry(),
        _business_letter(),
    ]
