# ABOUTME: Core domain: review records, URL validation, page fetching, and the extraction pipeline
# ABOUTME: Orchestrates the review page → game page fetch sequence

"""
Core Layer: Pipeline orchestration and domain records

This layer provides:
- ReviewInfo and FetchedPage records
- Review URL validation
- The httpx page fetcher
- ExtractionPipeline with switch-latest semantics

Data Flow: Review URL → Fetch → Extraction layer → ReviewInfo → Rendering layer
"""
