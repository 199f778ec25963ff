"""
DynamoDB table adapters.
"""
