"""
Report Renderer: HTML fragment for a completed audit, inserted into the
form page below the submit button.
"""
import html
import textwrap

from agents.auditor.models.schemas import AnalysisResult

SEVERITY_CLASSES = {
    "critical": "sev-critical",
    "high": "sev-high",
    "medium": "sev-medium",
    "low": "sev-low",
}


def score_class(score: float) -> str:
    if score >= 80:
        return "score-good"
    if score >= 50:
        return "score-warn"
    return "score-bad"


def severity_class(severity: str) -> str:
    return SEVERITY_CLASSES.get(severity.lower(), "sev-info")


def format_score(score: float) -> str:
    return str(int(score)) if float(score).is_integer() else f"{score:.1f}"


def _esc(text) -> str:
    return html.escape(str(text))


def _section(title: str, body: str) -> str:
    return (
        f'<section class="report-section"><h3>{_esc(title)}</h3>'
        f'<div class="section-body">{body}</div></section>'
    )


def _vulnerabilities_html(result: AnalysisResult) -> str:
    if not result.vulnerabilities:
        return '<p class="ok">No major vulnerabilities found.</p>'
    cards = []
    for vuln in result.vulnerabilities:
        cards.append(
            f'<div class="vuln {severity_class(vuln.severity)}">'
            f'<div class="vuln-head"><h4>{_esc(vuln.name)}</h4>'
            f'<span class="badge">{_esc(vuln.severity)}</span></div>'
            f'<p>{_esc(vuln.description)}</p></div>'
        )
    return "".join(cards)


def _tokenomics_html(result: AnalysisResult) -> str:
    passed = result.tokenomics.passed_audit_standards
    verdict = '<span class="ok">Yes</span>' if passed else '<span class="bad">No</span>'
    return (
        f'<p class="verdict">Passes Standard Audits: {verdict}</p>'
        f'<p>{_esc(result.tokenomics.analysis)}</p>'
    )


def _red_flags_html(result: AnalysisResult) -> str:
    if not result.exchange_red_flags:
        return '<p class="ok">No major exchange red flags identified.</p>'
    items = "".join(
        f"<li><strong>{_esc(f.flag)}:</strong> {_esc(f.description)}</li>"
        for f in result.exchange_red_flags
    )
    return f'<ul class="flags">{items}</ul>'


def render_report(result: AnalysisResult) -> str:
    cls = score_class(result.score)
    return textwrap.dedent(f"""\
        <div class="report">
          <div class="report-top">
            <div class="score-card {cls}">
              <div class="score">{format_score(result.score)}</div>
              <p>Safety Score</p>
            </div>
            <div class="summary-card">
              <h2>Audit Summary</h2>
              <p class="recommendation {cls}">{_esc(result.recommendation)}</p>
              <p>{_esc(result.summary)}</p>
            </div>
          </div>
          {_section("Vulnerability Scan", _vulnerabilities_html(result))}
          {_section("Tokenomics Analysis", _tokenomics_html(result))}
          {_section("Exchange Red Flags", _red_flags_html(result))}
        </div>
        """)
