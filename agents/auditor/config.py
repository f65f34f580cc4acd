import re

AGENT_NAME = "auditor"

# Contract input
ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")

# Whitepaper classification (extension/MIME only, no content sniffing)
TEXT_EXTENSIONS = (".txt", ".md")
PDF_EXTENSION = ".pdf"
DOCX_EXTENSION = ".docx"
TEXT_MIME_PREFIX = "text/"
DEFAULT_TEXT_MIME = "text/plain"
PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Phase labels shown by the loader
PHASE_FETCHING_SOURCE = "Fetching contract from Etherscan..."
PHASE_READING_CONTRACT = "Reading contract file..."
PHASE_READING_WHITEPAPER = "Reading whitepaper..."
PHASE_ANALYZING = "Analyzing with Claude..."

# AI request
AUDIT_TEMPERATURE = 0.2  # Low for consistent, reproducible audits
AUDIT_TOOL_NAME = "record_audit"
NO_WHITEPAPER_MARKER = "No whitepaper was provided."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."
