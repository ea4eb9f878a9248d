"""Helpers for characters, strings, byte buffers, linked lists, output and line reading."""