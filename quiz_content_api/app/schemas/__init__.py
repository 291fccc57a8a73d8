"""
Pydantic schema definitions for API payloads.

Request and response bodies for categories and questions.  Field
names follow the camelCase keys of the backing document
(``riveFile``, ``stateMachine``) because game clients consume them
as is.
"""
