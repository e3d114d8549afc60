"""Console, JSON and HTML reports for a comparison result."""
import os
import html
import json

from scoring import LABEL_DESCRIPTIONS, classify

METRIC_LABELS = [
    ('token_seq', "Token Sequence Similarity (LCS)"),
    ('structure', "Structure Similarity"),
    ('ngram', "N-gram Similarity (3-grams)"),
    ('frequency', "Token Frequency Similarity"),
    ('edit_distance', "Edit Distance Similarity"),
]

LINE_WIDTH = 60


def verdict_text(label):
    """Warning line shown under the overall score."""
    prefix = "PASS" if label == 'minimal' else "WARNING"
    return f"{prefix}: {LABEL_DESCRIPTIONS[label]}"


def format_text_report(result):
    """
    Render a result as the plain-text console report.

    Args:
        result (ComparisonResult): Result of detector.compare

    Returns:
        str: Multi-line report
    """
    scores = result.scores()
    lines = [
        "=" * LINE_WIDTH,
        "         PLAGIARISM DETECTION RESULTS",
        "=" * LINE_WIDTH,
        "",
    ]
    for key, label in METRIC_LABELS:
        lines.append(f"  {label + ':':<34}{scores[key] * 100:.2f}%")
    lines += [
        "",
        "-" * LINE_WIDTH,
        f"  {'OVERALL PLAGIARISM SCORE:':<34}{result.overall * 100:.2f}%",
        "=" * LINE_WIDTH,
        "",
        f"  {verdict_text(result.label)}",
        "",
        "=" * LINE_WIDTH,
    ]
    return "\n".join(lines)


def format_json_report(result, name1=None, name2=None):
    """Serialize a result (and optionally the compared file names) as JSON."""
    data = result.as_dict()
    if name1 is not None or name2 is not None:
        data['files'] = [name1, name2]
    return json.dumps(data, indent=2)


SCORE_CLASSES = {
    'high': "score-high",
    'moderate': "score-med",
    'low': "score-med",
    'minimal': "score-low",
}


def _score_class(score):
    """CSS class for a score, banded the same way as scoring.classify."""
    return SCORE_CLASSES[classify(score)]


def generate_html_report(result, name1, name2, code1, code2, output_file=None):
    """
    Generates an HTML report with the scores and both sources side by side.

    Args:
        result (ComparisonResult): Result of detector.compare
        name1, name2 (str): Display names of the compared files
        code1, code2 (str): Source texts
        output_file (str, optional): Destination path. Defaults to
            reports/<name1>_vs_<name2>.html under the current directory.

    Returns:
        str: Path of the written report
    """
    if output_file is None:
        reports_dir = os.path.join(os.getcwd(), "reports")
        os.makedirs(reports_dir, exist_ok=True)
        stem1 = os.path.splitext(os.path.basename(name1))[0]
        stem2 = os.path.splitext(os.path.basename(name2))[0]
        output_file = os.path.join(reports_dir, f"{stem1}_vs_{stem2}.html")

    scores = result.scores()
    rows = ""
    for key, label in METRIC_LABELS:
        rows += f"""
                <tr><td>{html.escape(label)}</td><td class="{_score_class(scores[key])}">{scores[key] * 100:.2f}%</td></tr>"""

    def numbered(code):
        count = max(1, len(code.splitlines()))
        return "\n".join(str(i) for i in range(1, count + 1))

    html_content = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Plagiarism Report - {name1} vs {name2}</title>
    <style>
        body {{ font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 0; padding: 20px; background-color: #f4f4f9; color: #333; }}
        h1 {{ text-align: center; color: #2c3e50; }}
        .container {{ max-width: 1200px; margin: 0 auto; background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }}
        table {{ width: 100%; border-collapse: collapse; margin-top: 20px; }}
        th, td {{ padding: 12px; text-align: left; border-bottom: 1px solid #ddd; white-space: nowrap; }}
        th {{ background-color: #3498db; color: white; }}
        .score-high {{ color: #e74c3c; font-weight: bold; }}
        .score-med {{ color: #f39c12; font-weight: bold; }}
        .score-low {{ color: #27ae60; font-weight: bold; }}
        .verdict {{ margin: 20px 0; padding: 15px; border-left: 5px solid {verdict_color}; background: #fafafa; font-weight: bold; }}
        .comparison-view {{ display: flex; gap: 20px; margin-top: 20px; }}
        .code-block {{ flex: 1; overflow: hidden; border: 1px solid #ddd; border-radius: 4px; }}
        .code-block h3 {{ margin: 10px; background: #eee; padding: 5px; border-radius: 4px; }}
        .code-container {{ overflow: auto; background: #f8f8f8; display: flex; max-height: 600px; }}
        .line-numbers {{ padding: 10px 5px; background: #e0e0e0; color: #888; text-align: right; font-family: monospace; font-size: 14px; line-height: 1.5; min-width: 40px; user-select: none; margin: 0; }}
        pre {{ margin: 0; padding: 10px; font-family: 'Consolas', 'Monaco', monospace; font-size: 14px; line-height: 1.5; white-space: pre; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>Code Plagiarism Report</h1>
        <p><strong>{name1}</strong> vs <strong>{name2}</strong></p>
        <table>
            <thead><tr><th>Metric</th><th>Similarity</th></tr></thead>
            <tbody>{rows}
                <tr><td><strong>Overall Plagiarism Score</strong></td><td class="{overall_class}">{overall:.2f}%</td></tr>
            </tbody>
        </table>
        <div class="verdict">{verdict}</div>
        <div class="comparison-view">
            <div class="code-block">
                <h3>{name1}</h3>
                <div class="code-container"><pre class="line-numbers">{lines1}</pre><pre>{code1}</pre></div>
            </div>
            <div class="code-block">
                <h3>{name2}</h3>
                <div class="code-container"><pre class="line-numbers">{lines2}</pre><pre>{code2}</pre></div>
            </div>
        </div>
    </div>
</body>
</html>
""".format(
        name1=html.escape(name1),
        name2=html.escape(name2),
        rows=rows,
        overall=result.overall * 100,
        overall_class=_score_class(result.overall),
        verdict=html.escape(verdict_text(result.label)),
        verdict_color="#27ae60" if result.label == 'minimal' else "#e74c3c",
        lines1=numbered(code1),
        lines2=numbered(code2),
        code1=html.escape(code1),
        code2=html.escape(code2),
    )

    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(html_content)
    return output_file
