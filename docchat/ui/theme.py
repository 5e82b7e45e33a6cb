"""Shared page styling."""

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #0f766e 0%, #1e3a8a 100%); }

    .message-user {
        background: linear-gradient(135deg, #0f766e 0%, #1e3a8a 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }
    .message-assistant strong { font-weight: 600; }

    .document-card {
        border: 1px solid #e5e7eb;
        border-radius: 10px;
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #0f766e; }

    .send-btn { background: linear-gradient(135deg, #0f766e 0%, #1e3a8a 100%) !important; }
</style>
"""
