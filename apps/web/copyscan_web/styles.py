CUSTOM_CSS = """
<style>
.stApp { background: #111827; color: #e5e7eb; }
h1.title {
    text-align: center;
    background: linear-gradient(90deg, #60a5fa, #5eead4);
    -webkit-background-clip: text;
    color: transparent;
}
.gauge { display: flex; justify-content: center; }
.match-card {
    background: #1f2937;
    border: 1px solid #374151;
    border-radius: 8px;
    padding: 1rem 1.5rem;
    margin-bottom: 1rem;
}
.match-card h4 { color: #60a5fa; margin-top: 0; }
.match-card .explanation { color: #9ca3af; font-style: italic; }
.match-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 1rem; }
.snippet { padding: 0.75rem; border-radius: 6px; font-family: monospace; font-size: 0.85rem; }
.snippet.source { background: rgba(127, 29, 29, 0.3); color: #fecaca; }
.snippet.checked { background: rgba(20, 83, 45, 0.3); color: #bbf7d0; }
.empty-state {
    text-align: center;
    padding: 2.5rem 1.5rem;
    border: 2px dashed #374151;
    border-radius: 8px;
}
</style>
"""
