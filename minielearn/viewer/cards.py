"""
Course card renderer - HTML fragments for course progress display.

Provides:
- Progress bar with done/total and percentage labels
- Course cards for the home grid
- Course header for the detail view
"""

import html

from minielearn.classroom import CourseMetrics

from .dispatcher import CourseCard, CourseView


def get_course_css() -> str:
    """Get CSS styles for course cards and progress bars."""
    return """
    <style>
    .course-card {
        background: white;
        border: 1px solid #e2e8f0;
        border-radius: 12px;
        padding: 1.2em;
        margin: 0.5em 0;
        box-shadow: 0 1px 2px rgba(0,0,0,0.05);
        transition: box-shadow 0.2s;
    }
    .course-card:hover {
        box-shadow: 0 4px 8px rgba(0,0,0,0.1);
    }
    .course-title {
        font-size: 1.15em;
        font-weight: 600;
        color: #0f172a;
    }
    .course-description {
        color: #475569;
        font-size: 0.9em;
        margin-top: 0.3em;
    }
    .progress-labels {
        display: flex;
        justify-content: space-between;
        font-size: 0.75em;
        color: #475569;
        margin-top: 1em;
    }
    .progress-track {
        height: 8px;
        border-radius: 999px;
        background: #e2e8f0;
        overflow: hidden;
        margin-top: 0.25em;
    }
    .progress-fill {
        height: 100%;
        background: #4f46e5;
    }
    .completed-badge {
        display: inline-block;
        font-size: 0.75em;
        padding: 0.15em 0.5em;
        margin-top: 0.8em;
        border-radius: 4px;
        background: #ecfdf5;
        color: #047857;
        border: 1px solid #a7f3d0;
    }
    </style>
    """


def render_progress_bar(metrics: CourseMetrics) -> str:
    """Render '<done>/<total> lessons' and '<percent>%' above a filled track."""
    return f"""
    <div class="progress-labels">
        <span>{metrics.done}/{metrics.total} lessons</span>
        <span>{metrics.percent}%</span>
    </div>
    <div class="progress-track">
        <div class="progress-fill" style="width: {metrics.percent}%"></div>
    </div>
    """


def render_completed_badge(metrics: CourseMetrics) -> str:
    if not metrics.is_completed:
        return ""
    return '<span class="completed-badge">Completed</span>'


def render_course_card(card: CourseCard) -> str:
    """Render a course card for the home grid (buttons are added by the caller)."""
    course = card.course
    return f"""
    <div class="course-card">
        <div class="course-title">{html.escape(course.title)}</div>
        <div class="course-description">{html.escape(course.description)}</div>
        {render_progress_bar(card.metrics)}
        {render_completed_badge(card.metrics)}
    </div>
    """


def render_course_header(view: CourseView) -> str:
    """Render title, description and progress for the course detail view."""
    course = view.course
    metrics = view.metrics
    return f"""
    <div class="course-title">{html.escape(course.title)}</div>
    <div class="course-description">{html.escape(course.description)}</div>
    <div class="progress-labels">
        <span>{metrics.done}/{metrics.total} lessons &bull; {metrics.percent}%</span>
    </div>
    <div class="progress-track">
        <div class="progress-fill" style="width: {metrics.percent}%"></div>
    </div>
    """


def complete_button_label(metrics: CourseMetrics) -> str:
    return "Course completed" if metrics.is_completed else "Mark course as completed"
