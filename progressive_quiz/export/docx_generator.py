"""DOCX document generator for practice sheets."""

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from progressive_quiz.models.certification import CertificationQuestion
from progressive_quiz.models.quiz import DifficultyLevel, Question

DIFFICULTY_COLORS = {
    DifficultyLevel.BEGINNER: RGBColor(0, 128, 0),
    DifficultyLevel.INTERMEDIATE: RGBColor(255, 140, 0),
    DifficultyLevel.ADVANCED: RGBColor(255, 0, 0),
}
UNRATED_COLOR = RGBColor(128, 128, 128)


def ensure_output_directory(output_dir: str = "output") -> Path:
    """
    Ensure the output directory exists.

    Args:
        output_dir: Directory path to create

    Returns:
        Path object for the output directory
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def generate_timestamped_filename(base_name: str, extension: str = "docx") -> str:
    """
    Generate a filename with timestamp.

    Args:
        base_name: Base name for the file
        extension: File extension (without dot)

    Returns:
        Filename with timestamp
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    # Clean the base name to remove any path components
    base_name = Path(base_name).name
    return f"{base_name}_{timestamp}.{extension}"


def export_to_docx(
    questions: Sequence[Question],
    output_path: str,
    title: str = "Practice Session",
    include_answers: bool = False,
    use_output_dir: bool = True,
    output_dir: str = "output",
) -> str:
    """
    Export a question sequence to a formatted DOCX practice sheet.

    Args:
        questions: Questions in the order they should be practised
        output_path: Path where the DOCX file should be saved
        title: Sheet title
        include_answers: If True, includes answers and explanations inline
        use_output_dir: If True, saves to output directory with timestamp
        output_dir: Directory to save files in (default: "output")

    Returns:
        Path to the created DOCX file
    """
    if use_output_dir:
        output_dir_path = ensure_output_directory(output_dir)
        filename = generate_timestamped_filename(Path(output_path).stem)
        output_path = str(output_dir_path / filename)

    doc = Document()
    setup_document_styles(doc)

    heading = doc.add_heading(title, level=0)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

    info_para = doc.add_paragraph()
    info_para.add_run(f"Total Questions: {len(questions)}").bold = True
    info_para.alignment = WD_ALIGN_PARAGRAPH.CENTER

    date_para = doc.add_paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    date_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    date_para.runs[0].font.size = Pt(9)
    date_para.runs[0].font.color.rgb = UNRATED_COLOR

    doc.add_page_break()

    for number, question in enumerate(questions, 1):
        add_question_to_document(doc, number, question, include_answers)

    doc.save(output_path)

    return output_path


def setup_document_styles(doc: Document) -> None:
    """
    Set up document-wide styles.

    Args:
        doc: Document to configure
    """
    style = doc.styles["Normal"]
    font = style.font
    font.name = "Calibri"
    font.size = Pt(11)

    for section in doc.sections:
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)


def add_question_to_document(
    doc: Document, number: int, question: Question, include_answers: bool = False
) -> None:
    """
    Add one question to the document.

    Args:
        doc: Document to add to
        number: Position of the question in the sheet
        question: Question to render
        include_answers: If True, marks the answer and adds the explanation
    """
    q_para = doc.add_paragraph()
    q_run = q_para.add_run(f"Q{number}. ")
    q_run.bold = True
    q_run.font.size = Pt(12)
    q_para.add_run(question.question)

    meta_para = doc.add_paragraph()
    difficulty = question.difficulty.value.capitalize() if question.difficulty else "Unrated"
    meta = f"  Difficulty: {difficulty}"
    if question.tags:
        meta += f"  |  Tags: {', '.join(question.tags)}"
    meta_run = meta_para.add_run(meta)
    meta_run.font.size = Pt(9)
    meta_run.italic = True
    meta_run.font.color.rgb = DIFFICULTY_COLORS.get(question.difficulty, UNRATED_COLOR)

    if isinstance(question, CertificationQuestion):
        for option in question.options:
            opt_para = doc.add_paragraph(f"   {option.id}. {option.text}")
            opt_para.paragraph_format.left_indent = Inches(0.5)

            if include_answers and option.is_correct:
                opt_para.runs[0].bold = True
                opt_para.runs[0].font.color.rgb = RGBColor(0, 128, 0)
                opt_para.add_run(" ✓").font.color.rgb = RGBColor(0, 128, 0)

    if include_answers and question.answer:
        ans_para = doc.add_paragraph()
        ans_para.paragraph_format.left_indent = Inches(0.5)
        ans_para.add_run("Answer: ").bold = True
        ans_para.add_run(question.answer)

    if include_answers and question.explanation:
        exp_para = doc.add_paragraph()
        exp_para.paragraph_format.left_indent = Inches(0.5)
        exp_run = exp_para.add_run(f"Explanation: {question.explanation}")
        exp_run.italic = True
        exp_run.font.size = Pt(10)
        exp_run.font.color.rgb = RGBColor(64, 64, 64)

    doc.add_paragraph()


def answer_text(question: Question) -> str:
    """Short answer line for the answer key."""
    if isinstance(question, CertificationQuestion):
        option = question.correct_option
        return f"{option.id} - {option.text}"
    return question.answer or "N/A"


def add_answer_key(doc: Document, questions: Sequence[Question]) -> None:
    """
    Add an answer key table to the document.

    Args:
        doc: Document to add to
        questions: Questions in sheet order
    """
    header = doc.add_heading("Answer Key", level=1)
    header.alignment = WD_ALIGN_PARAGRAPH.CENTER
    header.runs[0].font.color.rgb = RGBColor(0, 51, 102)

    table = doc.add_table(rows=1, cols=3)
    table.style = "Light Grid Accent 1"

    header_cells = table.rows[0].cells
    header_cells[0].text = "Q#"
    header_cells[1].text = "Answer"
    header_cells[2].text = "Explanation"

    for cell in header_cells:
        for paragraph in cell.paragraphs:
            for run in paragraph.runs:
                run.bold = True

    for number, question in enumerate(questions, 1):
        row_cells = table.add_row().cells
        row_cells[0].text = str(number)
        row_cells[1].text = answer_text(question)
        row_cells[2].text = question.explanation or "N/A"


def generate_answer_key(
    questions: Sequence[Question], output_path: str, title: str = "Practice Session"
) -> str:
    """
    Generate a separate answer key document.

    Args:
        questions: Questions in sheet order
        output_path: Path where the answer key should be saved
        title: Title of the matching practice sheet

    Returns:
        Path to the created answer key file
    """
    doc = Document()
    setup_document_styles(doc)

    heading = doc.add_heading(f"{title} - Answer Key", level=0)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

    doc.add_paragraph()
    add_answer_key(doc, questions)

    doc.save(output_path)

    return output_path


def export_with_separate_answers(
    questions: Sequence[Question],
    base_path: str,
    title: str = "Practice Session",
    output_dir: str = "output",
) -> tuple[str, str]:
    """
    Export a practice sheet with questions and answers in separate files.

    Args:
        questions: Questions in sheet order
        base_path: Base path for output files (without extension)
        title: Sheet title
        output_dir: Directory to save files in (default: "output")

    Returns:
        Tuple of (questions_path, answers_path)
    """
    output_path = ensure_output_directory(output_dir)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    base_name = Path(base_path).name

    questions_path = str(output_path / f"{base_name}_questions_{timestamp}.docx")
    answers_path = str(output_path / f"{base_name}_answers_{timestamp}.docx")

    export_to_docx(questions, questions_path, title, include_answers=False, use_output_dir=False)
    generate_answer_key(questions, answers_path, title)

    return questions_path, answers_path
