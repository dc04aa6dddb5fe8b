from ingestion.extractors.s3_extractor import S3Extractor, decode_body

__all__ = ["S3Extractor", "decode_body"]
