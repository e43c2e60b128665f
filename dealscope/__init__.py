"""DealScope 검색 집계 서비스"""

__version__ = "1.0.0"
