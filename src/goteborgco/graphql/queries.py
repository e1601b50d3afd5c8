"""Default field selections for each resource.

Callers may pass their own selection text instead; it replaces everything
inside the root field and must keep the envelope keys the resource unwraps
(for example ``guides { ... }`` inside the ``guides`` root).
"""

GUIDE_FIELDS = """
id
title
excerpt
date
categories
areas
tags
category_heading
dates {
  end
  start
}
featuredmedia {
  sizes {
    large {
      height
      source_url
      width
    }
  }
}
translations {
  en
  sv
}
"""

EVENT_FIELDS = """
areas
categories
category_heading
classification
contact {
  email
  facebook
  instagram
  phone
  website
}
currentInTime {
  months
  weekdays
}
date
dates {
  end
  start
}
excerpt
featuredmedia {
  alt_text
  caption
  credit
  id
  media_type
  mime_type
  sizes {
    full {
      height
      source_url
      width
    }
  }
}
free
id
invisible_tags
lang
link
place_id
tags
title
translations {
  en
  sv
}
type
"""

PLACE_FIELDS = """
id
title
excerpt
content
date
modified
link
categories
areas
tags
category_heading
featuredmedia {
  id
  credit
  caption
  alt_text
  media_type
  mime_type
  sizes {
    medium {
      width
      height
      source_url
    }
    full {
      width
      height
      source_url
    }
  }
}
gallery {
  id
  credit
  caption
  sizes {
    full {
      width
      height
      source_url
    }
  }
}
contact {
  email
  phone
  website
  facebook
  instagram
}
location {
  address
  lat
  lng
  zoom
  place_id
  name
  street_number
  street_name
  state
  post_code
  country
  country_short
}
currentInTime {
  months
  weekdays
}
translations {
  en
  sv
}
"""

SEARCH_FIELDS = """
id
title
excerpt
content
date
modified
link
categories
areas
tags
category_heading
featuredmedia {
  id
  credit
  caption
  alt_text
  media_type
  mime_type
  sizes {
    medium {
      width
      height
      source_url
    }
    full {
      width
      height
      source_url
    }
  }
}
location {
  address
  lat
  lng
  zoom
  place_id
  name
  street_number
  street_name
  state
  post_code
  country
  country_short
}
translations {
  en
  sv
}
"""

MARKER_FIELDS = """
type
features {
  type
  geometry {
    type
    coordinates
  }
  properties {
    id
    name
    icon
    type
    slug
  }
}
"""

TAXONOMY_FIELDS = """
name
description
value
types
"""

TAXONOMY_TERM_FIELDS = """
id
name
count
description
parent
"""
