"""Shared HTML documents for the structural analyzer tests."""

import pytest


DIV_SOUP_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Example Page</title>
</head>
<body>
  <div class="header">
    <div class="logo">My Website</div>
    <div class="nav">
      <a href="/">Home</a>
      <a href="/about">About</a>
    </div>
  </div>

  <div class="content">
    <div class="post">
      <h1>Article Title</h1>
      <p>This is an example using divs instead of semantic elements.</p>
      <div onclick="like()">Like This</div>
    </div>

    <div class="sidebar">
      <h2>Related</h2>
      <ul>
        <li>Link 1</li>
        <li>Link 2</li>
      </ul>
    </div>
  </div>

  <div class="footer">
    <p>&copy; 2024 My Website</p>
  </div>
</body>
</html>"""

SEMANTIC_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Semantic Example</title>
</head>
<body>
  <header>
    <div class="logo">My Website</div>
    <nav aria-label="Main navigation">
      <a href="/">Home</a>
      <a href="/about">About</a>
    </nav>
  </header>

  <main>
    <article>
      <h1>Article Title</h1>
      <p>This example uses proper semantic HTML5 elements.</p>
      <button type="button" onclick="like()">Like This</button>
    </article>

    <aside>
      <h2>Related</h2>
      <ul>
        <li>Link 1</li>
        <li>Link 2</li>
      </ul>
    </aside>
  </main>

  <footer>
    <p>&copy; 2024 My Website</p>
  </footer>
</body>
</html>"""

ACCESSIBLE_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Welcome to My Website</title>
</head>
<body>
  <header>
    <nav aria-label="Main navigation">
      <a href="/">Home</a>
      <a href="/about">About</a>
    </nav>
  </header>

  <main>
    <h1>Welcome to Our Site</h1>

    <section>
      <h2>Featured Content</h2>
      <p>This is an example of accessible HTML structure.</p>
      <img src="example.jpg" alt="A beautiful landscape" />
    </section>

    <section>
      <h2>About Us</h2>
      <h3>Our Mission</h3>
      <p>Making the web accessible for everyone.</p>
    </section>
  </main>

  <footer>
    <p>&copy; 2024 My Website</p>
  </footer>
</body>
</html>"""


@pytest.fixture
def div_soup_html():
    return DIV_SOUP_HTML


@pytest.fixture
def semantic_html():
    return SEMANTIC_HTML


@pytest.fixture
def accessible_page_html():
    return ACCESSIBLE_PAGE_HTML
