"""
ctxslides/renderer/templates.py -- Fixed ConTeXt document boilerplate

S6 pages, white-on-black, Fira fonts, vim-highlighted RUBY and SH code
environments. Written verbatim around the rendered slides.
"""

PROLOGUE = r"""\setuppapersize[S6][S6]
\setuplayout[backspace=10mm,
    width=190mm,
    topspace=5mm,
    header=0mm,
    footer=0mm,
    %height=250mm,
    edge=0mm,
    margin=0mm]
\setupbackgrounds[page][background=color,backgroundcolor=black]

\usemodule[vim]
\usemodule[simplefonts][size=30pt]



\setmainfont[firasansotnormal]
\setmonofont[firamonootnormal]
\setsansfont[firasansotnormal]
\definesimplefont[Subject][firasansotnormal][size=90pt]
\definesimplefont[SubSubject][firasansotnormal][size=50pt]

\setuphead [section]    [style=Subject,
                          align=middle]
\setuphead [subsection] [style=SubSubject,
                          align=middle]

\definevimtyping [RUBY]  [syntax=ruby,
                           before={\switchtobodyfont[20pt]},
                           after={\switchtobodyfont[30pt]},
                           lines=split]
\definevimtyping [SH]    [syntax=sh,
                           before={\switchtobodyfont[20pt]},
                           after={\switchtobodyfont[30pt]}]
\setuppagenumbering[state=stop]

\setuptolerance[verytolerant,stretch]

\setupalign[lohi]
\setupitemgroup[itemize][align=right]
\setupinterlinespace[line=1.2\bodyfontsize]
\definehighlight
  [emphasis]
  [style=italic]


\starttext
\startcolor[white]
"""

EPILOGUE = r"""\stopcolor
\stoptext
"""

SLIDE_START = r"\startstandardmakeup[align=middle]"
SLIDE_STOP = r"\stopstandardmakeup"
