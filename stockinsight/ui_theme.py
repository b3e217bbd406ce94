def inject_theme() -> str:
    return """
<style>
:root {
  --bg-a: #f3f8ff;
  --bg-b: #e8f4ee;
  --glass: rgba(255,255,255,0.72);
  --line: rgba(16,42,67,0.12);
  --text: #102a43;
}
.stApp {
  background: radial-gradient(circle at 15% 10%, var(--bg-a), #ffffff 48%),
              radial-gradient(circle at 80% 20%, var(--bg-b), transparent 45%);
}
.block-container {
  padding-top: 1.2rem;
  max-width: 900px;
}
.hero {
  padding: 1rem 1.2rem;
  border: 1px solid var(--line);
  border-radius: 18px;
  background: var(--glass);
  backdrop-filter: blur(8px);
  margin-bottom: 0.8rem;
}
.badge {
  display: inline-block;
  border-radius: 999px;
  padding: 0.2rem 0.8rem;
  font-size: 1rem;
  font-weight: 600;
  border: 1px solid var(--line);
  margin-bottom: 0.5rem;
}
.badge-pass { background: #e8f7f3; color: #087264; }
.badge-fail { background: #fdecec; color: #b42318; }
@media (max-width: 900px) {
  .block-container { padding-top: 0.5rem; }
}
</style>
"""
