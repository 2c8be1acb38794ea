HTML_TEMPLATE = """<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{title}</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">
  <link rel="stylesheet" href="{stylesheet_href}" />
  <style>
    html,body{{margin:0;padding:0}}
    *,*::before,*::after{{box-sizing:border-box}}
    p{{margin:0}}
    body{{display:flex;justify-content:center;align-items:center;background:#ffffff;min-height:100vh}}
    .artboard{{width:{width}px;height:{height}px;transform-origin:top center}}
  </style>
</head>
<body>
  <div class="artboard" data-frame-w="{width}" data-frame-h="{height}">
{body}
  </div>
  <script>
    (function fitArtboard(){{
      const el = document.querySelector('.artboard');
      function fit(){{
        const fw = Number(el.getAttribute('data-frame-w')) || el.offsetWidth;
        const fh = Number(el.getAttribute('data-frame-h')) || el.offsetHeight;
        const scale = Math.min(window.innerWidth / fw, window.innerHeight / fh);
        el.style.transform = 'scale(' + scale + ')';
      }}
      window.addEventListener('resize', fit);
      fit();
    }})();
  </script>
</body>
</html>"""


def html_boilerplate(body_html, size, title="Figma → HTML", stylesheet_href="./styles.css"):
    """
    Wrap rendered markup in a page whose .artboard has the frame's size and is
    scaled to fit the viewport.
    size: (width, height) in px
    """
    width, height = size
    return HTML_TEMPLATE.format(
        title=title,
        stylesheet_href=stylesheet_href,
        width=width,
        height=height,
        body=body_html,
    )


def inline_stylesheet(page_html, stylesheet, stylesheet_href="./styles.css"):
    """Swap the <link> to the external stylesheet for an inline <style> (used for previews)."""
    link = f'<link rel="stylesheet" href="{stylesheet_href}" />'
    return page_html.replace(link, f"<style>\n{stylesheet}\n  </style>", 1)
