"""Interactive command-line interface.

A numbered menu over one ``WritersApp``. AI actions are driven with
``asyncio.run`` and are reported as errors when no API key is configured.

Usage:
    writers-app
    writers-app --log-level INFO --no-ai
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

from writers_app import __version__
from writers_app.core.config import get_settings
from writers_app.core.factory import ComponentFactory
from writers_app.core.logging_config import setup_logging
from writers_app.interfaces.exporter import ExportFormat, format_date
from writers_app.interfaces.store import RecordNotFoundError
from writers_app.interfaces.text_generator import AIDisabledError, TextGenerationError
from writers_app.services.workspace import WritersApp
from writers_app.strategies.assistance.models import AIModel
from writers_app.strategies.stores.models import Document
from writers_app.strategies.template_engine.models import Template, TemplateCategory

logger = logging.getLogger(__name__)

T = TypeVar("T")

MENU = """
=== Writers App ===
1. Browse templates
2. Create document from template
3. Create blank document
4. View documents
5. Statistics
6. Search templates
7. Search documents
8. Export document

AI Assistance ({ai_status})
10. Continue writing
11. Improve document
12. Suggest titles
13. Analyze document
14. Brainstorm ideas
15. Develop character
16. Generate outline

0. Exit
"""

EXPORT_FORMATS = [ExportFormat.PLAIN_TEXT, ExportFormat.MARKDOWN, ExportFormat.HTML]


class WritersCLI:
    """Numbered-menu front end.

    Attributes:
        app: The application instance driven by the menu.
    """

    def __init__(
        self,
        app: WritersApp,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.app = app
        self._input = input_func
        self._output = output
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.browse_templates,
            "2": self.create_from_template,
            "3": self.create_blank_document,
            "4": self.view_documents,
            "5": self.show_statistics,
            "6": self.search_templates,
            "7": self.search_documents,
            "8": self.export_document,
            "10": self.continue_writing,
            "11": self.improve_document,
            "12": self.suggest_titles,
            "13": self.analyze_document,
            "14": self.brainstorm_ideas,
            "15": self.develop_character,
            "16": self.generate_outline,
        }

    def run(self) -> int:
        """Run the menu loop until the user exits. Returns the exit code."""
        while True:
            self._output(MENU.format(ai_status=self._ai_status()))

            try:
                choice = self._input("Select an option: ").strip()
            except EOFError:
                choice = "0"

            if choice == "0":
                self._output("Goodbye!")
                return 0

            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid option.")
                continue

            try:
                action()
            except (RecordNotFoundError, AIDisabledError, TextGenerationError) as e:
                logger.warning(f"Menu option {choice} failed: {e}")
                self._output(f"Error: {e}")

    # =========================================================================
    # Prompt helpers
    # =========================================================================

    def _ai_status(self) -> str:
        model = self.app.ai_model
        if model is None:
            return "disabled"
        try:
            return f"enabled, {AIModel(model).display_name}"
        except ValueError:
            return f"enabled, {model}"

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _choose(self, items: Sequence[T], describe: Callable[[T], str], noun: str) -> T | None:
        """Print a numbered list and return the selected item, or None."""
        if not items:
            self._output(f"No {noun}s found.")
            return None

        for index, item in enumerate(items, start=1):
            self._output(f"{index}. {describe(item)}")

        answer = self._ask(f"Select a {noun} (1-{len(items)}): ")
        if not answer.isdigit() or not 1 <= int(answer) <= len(items):
            self._output("Invalid selection.")
            return None
        return items[int(answer) - 1]

    def _choose_category(self) -> TemplateCategory | None:
        categories = list(TemplateCategory)
        return self._choose(categories, lambda c: c.value, "category")

    def _choose_document(self) -> Document | None:
        return self._choose(self.app.documents.list_all(), _describe_document, "document")

    def _confirm(self, prompt: str) -> bool:
        return self._ask(f"{prompt} [y/N]: ").lower() in ("y", "yes")

    # =========================================================================
    # Templates and documents
    # =========================================================================

    def browse_templates(self) -> None:
        self._print_templates(self.app.templates.list_all())

    def search_templates(self) -> None:
        query = self._ask("Search templates for: ")
        if query:
            self._print_templates(self.app.templates.search(query))

    def _print_templates(self, templates: list[Template]) -> None:
        if not templates:
            self._output("No templates found.")
            return
        for template in templates:
            self._output(f"- {template.name} [{template.category.value}]")
            if template.description:
                self._output(f"    {template.description}")

    def create_from_template(self) -> None:
        """Prompt for each placeholder and create a document.

        Empty answers fall back to the placeholder default. Creation is
        aborted when a required placeholder ends up without a value.
        """
        template = self._choose(
            self.app.templates.list_all(),
            lambda t: f"{t.name} [{t.category.value}]",
            "template",
        )
        if template is None:
            return

        values: dict[str, str] = {}
        for placeholder in template.placeholders:
            hint = ""
            if placeholder.default_value is not None:
                hint = f" (default: {placeholder.default_value})"
            elif not placeholder.required:
                hint = " (optional)"
            answer = self._ask(f"{placeholder.label}{hint}: ")
            if answer:
                values[placeholder.key] = answer

        missing = template.missing_required(values)
        if missing:
            self._output(f"Missing required values: {', '.join(missing)}. Document not created.")
            return

        document = self.app.create_document_from_template(template.id, values)
        self._output(f"Created '{document.title}' ({document.word_count} words).")

    def create_blank_document(self) -> None:
        title = self._ask("Document title: ")
        if not title:
            self._output("A title is required.")
            return
        category = self._choose_category()
        if category is None:
            return

        document = self.app.create_blank_document(title, category)
        self._output(f"Created blank document '{document.title}'.")

    def view_documents(self) -> None:
        document = self._choose_document()
        if document is None:
            return

        self.app.documents.mark_opened(document.id)
        self._print_document(document)

    def search_documents(self) -> None:
        query = self._ask("Search documents for: ")
        if not query:
            return
        documents = self.app.documents.search(query)
        if not documents:
            self._output("No documents found.")
        for document in documents:
            self._output(f"- {_describe_document(document)}")

    def _print_document(self, document: Document) -> None:
        self._output(f"\n# {document.title}")
        self._output(
            f"{document.category.value} | {document.word_count} words | "
            f"{document.character_count} characters | "
            f"{document.reading_time} min read | "
            f"modified {format_date(document.metadata.modified)}"
        )
        goal = document.metadata.word_count_goal
        if goal:
            self._output(f"Goal: {document.word_count}/{goal} words")
        self._output("")
        self._output(document.content or "(empty)")

    def show_statistics(self) -> None:
        stats = self.app.get_statistics()
        self._output(f"Documents: {stats.total_documents}")
        self._output(f"Total words: {stats.total_word_count}")
        self._output(f"Average words per document: {stats.average_word_count}")
        self._output(f"Templates: {stats.total_templates}")
        for category, count in sorted(stats.documents_by_category.items(), key=lambda i: i[0].value):
            self._output(f"  {category.value}: {count}")

        progress = self.app.documents.progress_by_goal()
        if progress:
            self._output("Progress towards goals:")
            for document, ratio in progress:
                self._output(f"  {document.title}: {ratio:.0%}")

    def export_document(self) -> None:
        """Export a document to stdout or to a file."""
        document = self._choose_document()
        if document is None:
            return
        export_format = self._choose(EXPORT_FORMATS, lambda f: f.value, "format")
        if export_format is None:
            return

        exporter = self.app.get_exporter(export_format)
        content = self.app.export_document(document.id, export_format)

        destination = self._ask("Save to file (leave empty to print): ")
        if not destination:
            self._output(content)
            return

        path = Path(destination)
        if not path.suffix:
            path = path.with_suffix(exporter.file_extension)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to export document {document.id} to {path}: {e}")
            self._output(f"Error: could not write {path}: {e.strerror or e}")
            return
        logger.info(f"Exported document {document.id} to {path}")
        self._output(f"Exported to {path}")

    # =========================================================================
    # AI assistance
    # =========================================================================

    def _require_ai(self) -> None:
        if not self.app.is_ai_enabled:
            raise AIDisabledError()

    def continue_writing(self) -> None:
        self._require_ai()
        document = self._choose_document()
        if document is None:
            return
        append = self._confirm("Append the continuation to the document?")
        continuation = asyncio.run(
            self.app.continue_document(document.id, append_to_document=append)
        )
        self._output(continuation)

    def improve_document(self) -> None:
        self._require_ai()
        document = self._choose_document()
        if document is None:
            return
        replace = self._confirm("Replace the document content with the improved version?")
        improved = asyncio.run(self.app.improve_document(document.id, replace_content=replace))
        self._output(improved)

    def suggest_titles(self) -> None:
        self._require_ai()
        document = self._choose_document()
        if document is None:
            return
        titles = asyncio.run(self.app.generate_document_titles(document.id))
        for index, title in enumerate(titles, start=1):
            self._output(f"{index}. {title}")

    def analyze_document(self) -> None:
        self._require_ai()
        document = self._choose_document()
        if document is None:
            return
        analysis = asyncio.run(self.app.analyze_document(document.id))
        self._output(analysis.analysis)

    def brainstorm_ideas(self) -> None:
        self._require_ai()
        topic = self._ask("Topic: ")
        if topic:
            self._output(asyncio.run(self.app.brainstorm_ideas(topic)))

    def develop_character(self) -> None:
        self._require_ai()
        concept = self._ask("Character concept: ")
        if concept:
            self._output(asyncio.run(self.app.develop_character(concept)))

    def generate_outline(self) -> None:
        self._require_ai()
        concept = self._ask("Story concept: ")
        if concept:
            self._output(asyncio.run(self.app.generate_outline(concept)))


def _describe_document(document: Document) -> str:
    return (
        f"{document.title} [{document.category.value}] - "
        f"{document.word_count} words, modified {format_date(document.metadata.modified)}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="writers-app",
        description="Templates, documents and AI writing assistance",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the LOG_LEVEL setting",
    )
    parser.add_argument(
        "--no-ai",
        action="store_true",
        help="Disable AI features even when ANTHROPIC_API_KEY is set",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Console script entry point."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    setup_logging(settings)

    app = ComponentFactory(settings).create_writers_app()
    if args.no_ai:
        app.disable_ai()

    try:
        return WritersCLI(app).run()
    except KeyboardInterrupt:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
