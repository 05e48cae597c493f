# ==============================================
# Conference Export Statistics
# ==============================================
#
# Package Structure (2 Topics + Orchestrator):
#
# confstats/
# ├── parsing/              # Topic 1: CSV text -> typed records
# ├── analysis/             # Topic 2: records -> aggregate statistics
# ├── config.py             # Configuration management
# ├── conference_info.py    # Orchestrator (file buffer -> infoType/infoData)
# └── cli.py                # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
