"""NiceGUI interface - thin visualization layer for document chat.

Responsibilities:
    - Login page driving the auth controller
    - Chat transcript display with formatted assistant replies
    - Document search drawer with selection checkboxes and chips
    - Sign out

Contains minimal business logic. Delegates all state to docchat.state.
The page modules are imported by docchat.main to register their routes.
"""
