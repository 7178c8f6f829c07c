"""
WebSocket Package

Socket.IO event handlers for real-time game updates.
"""
