# svg.py
# SVG overlay for a traced outline: one square per pixel plus the walk polyline

def path_d(points):
    if not points: return ""
    d=f"M {points[0].x + 0.5} {points[0].y + 0.5}"
    for p in points[1:]: d+=f" L {p.x + 0.5} {p.y + 0.5}"
    return d+" Z"

def write_svg(path_points, size, out_path, show_path=True):
    w,h=size
    parts=[f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">','<g fill="red" stroke="none">']
    for p in path_points:
        parts.append(f'<rect x="{p.x}" y="{p.y}" width="1" height="1" />')
    parts.append('</g>')
    if show_path and len(path_points) > 1:
        parts.append(f'<path d="{path_d(path_points)}" fill="none" stroke="blue" stroke-width="0.2" />')
    parts.append('</svg>')
    with open(out_path,'w') as f: f.write("\n".join(parts))
