"""
Lambda Handlers for Location API

サーバレス構成のエントリポイント:
- Locations (DynamoDB + Nominatim)
"""
