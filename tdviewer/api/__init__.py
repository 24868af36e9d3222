"""Viewer HTTP API - FastAPI app, request/response models, routes"""
