from ingestion.transformers.row_parser import parse_headers, parse_row, split_lines

__all__ = ["parse_headers", "parse_row", "split_lines"]
