from ingestion.loaders.dynamodb_loader import DynamoDBLoader

__all__ = ["DynamoDBLoader"]
