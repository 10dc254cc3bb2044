"""Minimal browser page for eyeballing the server state."""

DEBUG_PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>Live Directory Tree</title>
    <style>
        body { font-family: system-ui; background: #1e1e1e; color: #d4d4d4; padding: 20px; }
        h1 { color: #569cd6; }
        .status { padding: 8px 16px; border-radius: 4px; display: inline-block; margin: 10px 0; }
        .connected { background: #2d5a2d; color: #90ee90; }
        .disconnected { background: #5a2d2d; color: #ff9090; }
        pre { background: #2d2d2d; padding: 15px; border-radius: 6px; overflow: auto; max-height: 70vh; }
        button { background: #0e639c; color: white; border: none; padding: 8px 16px;
                 border-radius: 4px; cursor: pointer; }
    </style>
</head>
<body>
    <h1>Live Directory Tree Server</h1>
    <div id="status" class="status disconnected">Checking...</div>
    <p><button onclick="copyTree()">Copy Tree</button></p>
    <pre id="tree">Loading...</pre>
    <script>
        async function refresh() {
            try {
                const status = await (await fetch('/status')).json();
                const statusEl = document.getElementById('status');
                statusEl.className = 'status ' + (status.connected ? 'connected' : 'disconnected');
                statusEl.textContent = status.connected
                    ? 'Connected: ' + status.name
                    : 'Waiting for Roblox Studio...';
                document.getElementById('tree').textContent = await (await fetch('/tree/text')).text();
            } catch (e) {
                document.getElementById('status').textContent = 'Error: ' + e.message;
            }
        }
        async function copyTree() {
            await navigator.clipboard.writeText(document.getElementById('tree').textContent);
        }
        refresh();
        setInterval(refresh, 2000);
    </script>
</body>
</html>
"""
