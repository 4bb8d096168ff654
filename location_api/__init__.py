"""
Location API

API Gateway + Lambda + DynamoDB によるロケーション CRUD サービス。
作成時は Nominatim (OpenStreetMap) でジオコーディングを行う。
"""

__version__ = "1.0.0"
